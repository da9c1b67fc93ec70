"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    ServiceCache,
    get_document_service,
    get_retrieval_orchestrator,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "ServiceCache",
    "get_document_service",
    "get_retrieval_orchestrator",
    "get_service_cache",
    "get_settings_dependency",
]
