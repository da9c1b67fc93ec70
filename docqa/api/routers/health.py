"""
Health check API endpoints.

Routes: GET /health

Dependencies: docqa.application
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from docqa.api.deps import get_document_service
from docqa.application.document_service import DocumentService


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str
    documents: int


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(
    document_service: DocumentService = Depends(get_document_service),
) -> HealthResponse:
    """Basic health check with the number of registered documents."""
    return HealthResponse(
        status="healthy",
        message="Server Healthy",
        documents=document_service.count(),
    )
