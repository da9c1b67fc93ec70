"""
Document lifecycle service.

Ingestion, listing and deletion use-cases over the document store.
Ingestion runs parse -> chunk -> embed -> index -> register, and nothing
is registered unless every stage succeeds.

Dependencies: fastapi.concurrency, docqa.core
System role: Application layer between HTTP routers and the core
"""

import logging
import time
import uuid
from datetime import datetime, timezone

from fastapi.concurrency import run_in_threadpool

from docqa.core.chunker import TextChunker
from docqa.core.document_store import DocumentStore
from docqa.core.embedder import Embedder
from docqa.core.exceptions import EmptyDocumentError
from docqa.core.pdf_parser import PdfParser
from docqa.core.vector_index import VectorIndex
from docqa.models.document import DocumentMetadata, IngestResult

logger = logging.getLogger(__name__)


class DocumentService:
    """Ingest, list, inspect and delete documents."""

    def __init__(
        self,
        store: DocumentStore,
        chunker: TextChunker,
        embedder: Embedder,
        parser: PdfParser | None = None,
    ) -> None:
        """
        Initialize service with its collaborators.

        Args:
            store: Registry that receives ingested documents
            chunker: Text chunker
            embedder: Embedder for chunk vectors
            parser: PDF parser (default PdfParser)
        """
        self._store = store
        self._chunker = chunker
        self._embedder = embedder
        self._parser = parser or PdfParser()

    async def ingest(self, file_path: str, filename: str) -> IngestResult:
        """
        Ingest a PDF file and register its vector index.

        Args:
            file_path: Path of the uploaded PDF on disk
            filename: Original client filename (metadata only)

        Returns:
            IngestResult: New document ID and counts

        Raises:
            ExtractionError: When the PDF cannot be read
            EmptyDocumentError: When the PDF yields no chunks
            EmbeddingError: When embedding fails
        """
        start_time = time.perf_counter()
        logger.info("Ingesting document", extra={"doc_filename": filename})

        pages = await run_in_threadpool(self._parser.parse, file_path)
        for page in pages:
            page.metadata["source"] = filename

        chunks = self._chunker.split_pages(pages)
        if not chunks:
            raise EmptyDocumentError(file_path=file_path)

        index = await VectorIndex.build(chunks, self._embedder)

        document_id = str(uuid.uuid4())
        metadata = DocumentMetadata(
            id=document_id,
            filename=filename,
            chunk_count=len(chunks),
            page_count=len(pages),
            created_at=datetime.now(timezone.utc),
        )
        self._store.put(document_id, index, metadata)

        processing_time_ms = round((time.perf_counter() - start_time) * 1000, 2)
        logger.info(
            "Document ingested",
            extra={
                "document_id": document_id,
                "doc_filename": filename,
                "chunk_count": len(chunks),
                "page_count": len(pages),
                "processing_time_ms": processing_time_ms,
            },
        )

        return IngestResult(
            document_id=document_id,
            filename=filename,
            chunk_count=metadata.chunk_count,
            page_count=metadata.page_count,
            created_at=metadata.created_at,
            processing_time_ms=processing_time_ms,
        )

    def list_documents(self) -> list[DocumentMetadata]:
        """Return all registered documents, oldest first."""
        return sorted(self._store.list(), key=lambda metadata: metadata.created_at)

    def get_document(self, document_id: str) -> DocumentMetadata:
        """
        Raises:
            DocumentNotFoundError: Unknown document ID
        """
        return self._store.get(document_id).metadata

    def delete_document(self, document_id: str) -> None:
        """
        Delete a document from the store.

        Raises:
            DocumentNotFoundError: Unknown document ID
        """
        self._store.delete(document_id)
        logger.info("Document deleted", extra={"document_id": document_id})

    def count(self) -> int:
        return len(self._store)
