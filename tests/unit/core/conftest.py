"""Shared fixtures for core unit tests"""

from datetime import datetime

import pytest

from docstore.crud.models import Author, Document


@pytest.fixture(name="doc")
def doc_fixture():
    """A single unsaved document created at noon on 2024-01-02."""
    return Document(
        title="Quarterly Report",
        content="Revenue grew in Q3",
        author=Author(id="a1", name="Ann"),
        created=datetime(2024, 1, 2, 12, 0, 0),
    )
