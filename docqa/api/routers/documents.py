"""
Document API endpoints.

Routes:
- POST /upload-pdf - Upload and ingest a PDF
- GET /documents - List ingested documents
- GET /documents/{document_id} - Get one document
- DELETE /documents/{document_id} - Delete a document

Dependencies: docqa.application, docqa.models
System role: Document HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, UploadFile

from docqa.api.deps import get_document_service, get_settings_dependency
from docqa.api.error_handling import handle_document_errors
from docqa.api.routers.router_utils import cleanup_temp_file, save_upload_to_temp
from docqa.application.document_service import DocumentService
from docqa.configs import Settings
from docqa.core.exceptions import UnsupportedMediaTypeError, ValidationError
from docqa.models.document import (
    DeleteDocumentResponse,
    DocumentDetailResponse,
    DocumentInfo,
    DocumentListResponse,
    UploadResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["documents"])

PDF_CONTENT_TYPE = "application/pdf"
UPLOAD_FALLBACK_NAME = "document.pdf"


@router.post("/upload-pdf", response_model=UploadResponse, response_model_by_alias=True)
@handle_document_errors
async def upload_pdf(
    pdf: UploadFile | None = File(None),
    document_service: DocumentService = Depends(get_document_service),
    settings: Settings = Depends(get_settings_dependency),
) -> UploadResponse:
    """
    Upload a PDF and build its vector index.

    Args:
        pdf: Multipart file field "pdf"
        document_service: Injected DocumentService
        settings: Injected settings (upload limits)

    Returns:
        UploadResponse: New document ID and chunk count

    Raises:
        HTTPException(400): No file or not a PDF
        HTTPException(413): File too large
        HTTPException(422): No text content extracted
        HTTPException(500): Extraction or embedding failed
    """
    if pdf is None:
        raise ValidationError("No PDF file uploaded", field="pdf")
    if pdf.content_type != PDF_CONTENT_TYPE:
        raise UnsupportedMediaTypeError(pdf.content_type)

    filename = pdf.filename or UPLOAD_FALLBACK_NAME
    file_path = await save_upload_to_temp(
        pdf,
        max_bytes=settings.upload.max_bytes,
        prefix=settings.upload.temp_prefix,
        read_chunk_bytes=settings.upload.read_chunk_bytes,
    )
    try:
        result = await document_service.ingest(file_path=file_path, filename=filename)
    finally:
        cleanup_temp_file(file_path, settings.upload.temp_prefix)

    return UploadResponse(
        document_id=result.document_id,
        filename=result.filename,
        chunks=result.chunk_count,
        pages=result.page_count,
    )


@router.get("/documents", response_model=DocumentListResponse, response_model_by_alias=True)
@handle_document_errors
async def list_documents(
    document_service: DocumentService = Depends(get_document_service),
) -> DocumentListResponse:
    """List all ingested documents, oldest first."""
    return DocumentListResponse(
        documents=[
            DocumentInfo.from_metadata(metadata)
            for metadata in document_service.list_documents()
        ],
    )


@router.get(
    "/documents/{document_id}",
    response_model=DocumentDetailResponse,
    response_model_by_alias=True,
)
@handle_document_errors
async def get_document(
    document_id: str,
    document_service: DocumentService = Depends(get_document_service),
) -> DocumentDetailResponse:
    """
    Get one document's metadata.

    Raises:
        HTTPException(404): Unknown document ID
    """
    metadata = document_service.get_document(document_id)
    return DocumentDetailResponse(document=DocumentInfo.from_metadata(metadata))


@router.delete("/documents/{document_id}", response_model=DeleteDocumentResponse)
@handle_document_errors
async def delete_document(
    document_id: str,
    document_service: DocumentService = Depends(get_document_service),
) -> DeleteDocumentResponse:
    """
    Delete a document.

    Raises:
        HTTPException(404): Unknown document ID
    """
    document_service.delete_document(document_id)
    return DeleteDocumentResponse()
