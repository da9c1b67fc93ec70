"""
Document registry.

Maps document IDs to their vector index and metadata. The in-memory
implementation is process-local and lost on restart.

Dependencies: docqa.core.vector_index, docqa.models
System role: Process-wide document lifecycle state
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from docqa.core.exceptions import DocumentNotFoundError
from docqa.core.vector_index import VectorIndex
from docqa.models.document import DocumentMetadata

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredDocument:
    """Registered document: its index plus metadata."""

    index: VectorIndex
    metadata: DocumentMetadata


class DocumentStore(ABC):
    """Registry of fully ingested documents."""

    @abstractmethod
    def put(self, document_id: str, index: VectorIndex, metadata: DocumentMetadata) -> None:
        """Register a document, replacing any entry with the same ID."""

    @abstractmethod
    def get(self, document_id: str) -> StoredDocument:
        """
        Look up a document.

        Raises:
            DocumentNotFoundError: When the ID is not registered
        """

    @abstractmethod
    def list(self) -> list[DocumentMetadata]:
        """Return metadata of all registered documents."""

    @abstractmethod
    def delete(self, document_id: str) -> None:
        """
        Remove a document.

        Raises:
            DocumentNotFoundError: When the ID is not registered
        """

    @abstractmethod
    def __contains__(self, document_id: str) -> bool: ...

    @abstractmethod
    def __len__(self) -> int: ...


class InMemoryDocumentStore(DocumentStore):
    """Dict-backed document store with optional oldest-first eviction."""

    def __init__(self, max_documents: int | None = None) -> None:
        """
        Args:
            max_documents: Capacity bound, None for unbounded
        """
        if max_documents is not None and max_documents < 1:
            raise ValueError("max_documents must be at least 1")
        self._max_documents = max_documents
        self._documents: dict[str, StoredDocument] = {}

    def put(self, document_id: str, index: VectorIndex, metadata: DocumentMetadata) -> None:
        self._documents.pop(document_id, None)
        self._documents[document_id] = StoredDocument(index=index, metadata=metadata)

        if self._max_documents is None:
            return
        while len(self._documents) > self._max_documents:
            evicted_id = next(iter(self._documents))
            evicted = self._documents.pop(evicted_id)
            logger.info(
                "Evicted document from store",
                extra={
                    "document_id": evicted_id,
                    "doc_filename": evicted.metadata.filename,
                    "max_documents": self._max_documents,
                },
            )

    def get(self, document_id: str) -> StoredDocument:
        try:
            return self._documents[document_id]
        except KeyError:
            raise DocumentNotFoundError(document_id) from None

    def list(self) -> list[DocumentMetadata]:
        return [stored.metadata for stored in self._documents.values()]

    def delete(self, document_id: str) -> None:
        try:
            del self._documents[document_id]
        except KeyError:
            raise DocumentNotFoundError(document_id) from None

    def __contains__(self, document_id: str) -> bool:
        return document_id in self._documents

    def __len__(self) -> int:
        return len(self._documents)
