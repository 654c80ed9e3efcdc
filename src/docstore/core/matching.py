"""Search predicates: one boolean matcher per filter category, combined by matches_all"""

from datetime import datetime
from typing import Optional

from docstore.crud.models import Document, SearchRequest


def matches_title_prefix(doc: Document, prefixes: list[str]) -> bool:
    """True if no prefixes are given or the title starts with any of them (case-sensitive)."""
    if not prefixes:
        return True
    return doc.title.startswith(tuple(prefixes))


def matches_contains_content(doc: Document, fragments: list[str]) -> bool:
    """True if no fragments are given or the content contains any of them (case-sensitive)."""
    if not fragments:
        return True
    return any(fragment in doc.content for fragment in fragments)


def matches_author_id(doc: Document, author_ids: list[str]) -> bool:
    if not author_ids:
        return True
    return doc.author.id in author_ids


def matches_created_range(
    doc: Document,
    created_from: Optional[datetime],
    created_to: Optional[datetime],
    ) -> bool:
    """Open interval check: created_from < created < created_to.

    A missing bound is unbounded on that side. A document without a created
    timestamp only matches when both bounds are missing.
    """
    if created_from is None and created_to is None:
        return True
    if doc.created is None:
        return False
    if created_from is not None and not doc.created > created_from:
        return False
    if created_to is not None and not doc.created < created_to:
        return False
    return True


def matches_all(doc: Document, request: SearchRequest) -> bool:
    """Conjunction of every category, cheapest first."""
    return (
        matches_author_id(doc, request.author_ids)
        and matches_title_prefix(doc, request.title_prefixes)
        and matches_contains_content(doc, request.contains_contents)
        and matches_created_range(doc, request.created_from, request.created_to)
    )
