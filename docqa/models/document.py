"""
Document domain models and schemas.

Registry metadata for ingested documents and the request/response
schemas of the document endpoints.

Dependencies: pydantic
System role: Document API contracts
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class DocumentMetadata(BaseModel):
    """Metadata kept alongside a document's vector index."""

    id: str = Field(description="Opaque unique document identifier")
    filename: str = Field(description="Original uploaded filename")
    chunk_count: int = Field(description="Number of chunks in the index", ge=0)
    page_count: int = Field(default=0, description="Number of pages parsed", ge=0)
    created_at: datetime = Field(description="Ingestion timestamp (UTC)")


class IngestResult(BaseModel):
    """Outcome of ingesting one PDF."""

    document_id: str
    filename: str
    chunk_count: int
    page_count: int
    created_at: datetime
    processing_time_ms: float = Field(description="Total processing time in milliseconds")


class UploadResponse(BaseModel):
    """Response schema for POST /upload-pdf."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    document_id: str = Field(alias="documentId")
    filename: str
    chunks: int
    pages: int
    message: str = "PDF processed and embeddings created successfully"


class DocumentInfo(BaseModel):
    """Single entry of the document listing."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    filename: str
    chunks: int
    pages: int
    created_at: datetime = Field(alias="createdAt")

    @classmethod
    def from_metadata(cls, metadata: DocumentMetadata) -> "DocumentInfo":
        """Create listing entry from registry metadata."""
        return cls(
            id=metadata.id,
            filename=metadata.filename,
            chunks=metadata.chunk_count,
            pages=metadata.page_count,
            created_at=metadata.created_at,
        )


class DocumentListResponse(BaseModel):
    """Response schema for GET /documents."""

    success: bool = True
    documents: list[DocumentInfo]


class DocumentDetailResponse(BaseModel):
    """Response schema for GET /documents/{document_id}."""

    success: bool = True
    document: DocumentInfo


class DeleteDocumentResponse(BaseModel):
    """Response schema for DELETE /documents/{document_id}."""

    success: bool = True
    message: str = "Document deleted successfully"
