"""Application services."""

from docqa.application.document_service import DocumentService

__all__ = ["DocumentService"]
