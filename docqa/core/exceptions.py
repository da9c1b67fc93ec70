"""
Exception hierarchy for the docqa service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for logging and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class DocQAException(Exception):
    """Base exception for all docqa application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(DocQAException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class UnsupportedMediaTypeError(ValidationError):
    """Raised when an upload is not a PDF."""

    def __init__(self, content_type: str | None, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["content_type"] = content_type
        super().__init__("Only PDF files are allowed!", field="pdf", details=details)


class PayloadTooLargeError(DocQAException):
    """Raised when an upload exceeds the configured size limit."""

    def __init__(self, max_bytes: int, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["max_bytes"] = max_bytes
        super().__init__("File too large", details)


class DocumentNotFoundError(DocQAException):
    """Raised when a document id is not registered."""

    def __init__(self, document_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize document not found error.

        Args:
            document_id: ID of the missing document
            details: Additional context
        """
        details = details or {}
        details["document_id"] = document_id
        self.document_id = document_id
        super().__init__("Document not found", details)


class DocumentProcessingError(DocQAException):
    """Base exception for document ingestion errors."""

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document processing error.

        Args:
            message: Error message
            document_id: ID of the document that failed
            details: Additional context
        """
        details = details or {}
        if document_id:
            details["document_id"] = document_id
        super().__init__(message, details)


class ExtractionError(DocumentProcessingError):
    """Raised when text cannot be extracted from a PDF."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        document_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize extraction error.

        Args:
            message: Error message
            file_path: Path of the file that failed extraction
            document_id: ID of the document
            details: Additional context
        """
        details = details or {}
        if file_path:
            details["file_path"] = file_path
        super().__init__(message, document_id, details)


class EmptyDocumentError(ExtractionError):
    """Raised when a PDF produces no usable text."""

    def __init__(
        self,
        file_path: str | None = None,
        document_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            "No text content could be extracted from the PDF",
            file_path=file_path,
            document_id=document_id,
            details=details,
        )


class EmbeddingError(DocumentProcessingError):
    """Raised when embedding generation fails."""

    pass


class GenerationError(DocQAException):
    """Raised when the language model fails to produce an answer."""

    def __init__(
        self,
        message: str,
        model: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize generation error.

        Args:
            message: Error message
            model: Model identifier used for the failed call
            details: Additional context
        """
        details = details or {}
        if model:
            details["model"] = model
        super().__init__(message, details)
