"""In-memory document store: id assignment, save modes, lookup and filtered search"""

import logging

from docstore.config import Settings
from docstore.core.matching import matches_all
from docstore.crud.models import Document, SearchRequest
from docstore.crud.repo import DocumentRepo


logger = logging.getLogger(__name__)


class InvalidSearchRequest(ValueError):
    """Raised by search when the request violates the configured range policy."""


class DocumentStore(DocumentRepo):
    """Ordered in-memory collection of documents.

    Holds live references: a document mutated by the caller after save is
    seen mutated by later lookups. Not safe for concurrent use.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()
        self._docs: list[Document] = []

    def __len__(self) -> int:
        return len(self._docs)

    def all(self) -> list[Document]:
        """Return a new list of every stored document in insertion order."""
        return list(self._docs)

    def _next_id(self) -> str:
        """Stored count + 1, bumped past ids already taken (only possible in upsert mode)."""
        n = len(self._docs) + 1
        taken = {d.id for d in self._docs}
        while str(n) in taken:
            n += 1
        return str(n)

    def _index_of(self, doc_id: str) -> int | None:
        for i, d in enumerate(self._docs):
            if d.id == doc_id:
                return i
        return None

    def save(self, document: Document) -> Document:
        """Assign an id to an id-less document and append it.

        A document that already carries an id is returned untouched and not
        stored in 'append-only' mode; in 'upsert' mode it replaces the stored
        document with the same id, or is appended when there is none.
        The created field is never touched.
        """
        if not document.id:
            document.id = self._next_id()
            self._docs.append(document)
            logger.debug("Assigned id %s to %r", document.id, document.title)
            return document

        if self.settings.save_mode != "upsert":
            logger.info("Ignoring document with existing id %s (append-only mode)", document.id)
            return document

        idx = self._index_of(document.id)
        if idx is None:
            self._docs.append(document)
            logger.debug("Upsert inserted id %s", document.id)
        else:
            self._docs[idx] = document
            logger.debug("Upsert replaced id %s at position %d", document.id, idx)
        return document

    def find_by_id(self, doc_id: str) -> Document | None:
        """Return the first document with exactly this id, or None."""
        idx = self._index_of(doc_id)
        return None if idx is None else self._docs[idx]

    def _check_bounds(self, request: SearchRequest) -> None:
        if self.settings.range_policy != "reject":
            return
        if (request.created_from is None) != (request.created_to is None):
            raise InvalidSearchRequest(
                "created_from and created_to must be given together "
                f"(got created_from={request.created_from}, created_to={request.created_to})"
            )

    def search(self, request: SearchRequest) -> list[Document]:
        """Return documents matching every criterion of request, in insertion order.

        Raises InvalidSearchRequest under the 'reject' range policy when only
        one created bound is given.
        """
        self._check_bounds(request)
        hits = [d for d in self._docs if matches_all(d, request)]
        logger.debug(
            "Search prefixes=%s contents=%s authors=%s range=(%s, %s) -> %d of %d",
            request.title_prefixes, request.contains_contents, request.author_ids,
            request.created_from, request.created_to, len(hits), len(self._docs),
        )
        return hits
