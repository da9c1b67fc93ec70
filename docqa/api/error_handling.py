"""
API error handling utilities.

Maps domain exceptions to HTTP status codes and renders every error
response as {"error": message}.

Dependencies: fastapi, starlette, docqa.core.exceptions
System role: Uniform HTTP error contract
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from docqa.core.exceptions import (
    DocumentNotFoundError,
    EmbeddingError,
    EmptyDocumentError,
    ExtractionError,
    GenerationError,
    PayloadTooLargeError,
    ValidationError,
)
from docqa.observability.log_utils import log_unexpected_exception

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_document_errors(func: F) -> F:
    """
    Decorator to transform domain errors into HTTPExceptions.

    This centralizes:
    - Logging of errors with their details
    - Mapping specific exceptions to HTTP status codes
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except DocumentNotFoundError as e:
            logger.warning(
                "Document not found",
                extra={"document_id": e.document_id, "error": str(e)},
            )
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except ValidationError as e:
            logger.warning("Invalid request", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except PayloadTooLargeError as e:
            logger.warning("Upload rejected", extra={"error": str(e)})
            raise HTTPException(status_code=413, detail=e.message)

        except EmptyDocumentError as e:
            logger.warning("No content extracted", extra={"error": str(e)})
            raise HTTPException(status_code=422, detail=e.message)

        except (ExtractionError, EmbeddingError, GenerationError) as e:
            logger.error(
                "Document operation failed",
                extra={"error_type": type(e).__name__, "error": str(e)},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=e.message,
            )

        except Exception as e:
            log_unexpected_exception(logger, "Unexpected failure in document operation", e)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=str(e) or "Internal server error",
            )

    return wrapper  # type: ignore


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTPException as the error envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures as 400."""
    message = "Invalid request"
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        if location:
            message = f"{message}: {location}"
        message = f"{message}: {first.get('msg')}"
    logger.warning("Request validation failed", extra={"path": request.url.path, "error": message})
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error envelope handlers on an app."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
