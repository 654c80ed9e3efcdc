"""Shared fixtures for crud unit tests"""

from datetime import datetime, timedelta

import pytest

from docstore.config import Settings
from docstore.crud.memory_repo import DocumentStore
from docstore.crud.models import Author, Document


T0 = datetime(2024, 1, 1, 12, 0, 0)


@pytest.fixture(name="store")
def store_fixture():
    """Empty store with default (append-only, unbounded) settings."""
    return DocumentStore()


@pytest.fixture(name="upsert_store")
def upsert_store_fixture():
    return DocumentStore(Settings(save_mode="upsert"))


@pytest.fixture(name="make_doc")
def make_doc_fixture():
    """Factory for id-less documents; created defaults to T0 + offset days."""
    def _make(title="Report A", content="quarterly numbers", author_id="a1", offset=0, **kwargs):
        kwargs.setdefault("created", T0 + timedelta(days=offset))
        return Document(
            title=title,
            content=content,
            author=Author(id=author_id, name=f"Author {author_id}"),
            **kwargs,
        )
    return _make
