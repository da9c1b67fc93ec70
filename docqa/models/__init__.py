"""Domain models and API schemas."""

from docqa.models.chunk import Chunk, SearchResult
from docqa.models.document import (
    DeleteDocumentResponse,
    DocumentDetailResponse,
    DocumentInfo,
    DocumentListResponse,
    DocumentMetadata,
    IngestResult,
    UploadResponse,
)
from docqa.models.query import (
    AnswerResult,
    DocumentSummary,
    QueryRequest,
    QueryResponse,
    SourceChunk,
)

__all__ = [
    "AnswerResult",
    "Chunk",
    "DeleteDocumentResponse",
    "DocumentDetailResponse",
    "DocumentInfo",
    "DocumentListResponse",
    "DocumentMetadata",
    "DocumentSummary",
    "IngestResult",
    "QueryRequest",
    "QueryResponse",
    "SearchResult",
    "SourceChunk",
    "UploadResponse",
]
