"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: docqa.configs, docqa.application, docqa.core, docqa.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from docqa.application.document_service import DocumentService
from docqa.configs import Settings, get_settings
from docqa.core.document_store import DocumentStore
from docqa.core.retrieval import RetrievalOrchestrator


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._embeddings = None
        self._chat_model = None
        self._document_store = None
        self._document_service = None
        self._retrieval_orchestrator = None

    @property
    def embeddings(self):
        """Get cached Gemini embeddings client."""
        if self._embeddings is None:
            from docqa.boundary.genai_clients import create_embeddings
            self._embeddings = create_embeddings(get_settings().models)
        return self._embeddings

    @property
    def chat_model(self):
        """Get cached Gemini chat model."""
        if self._chat_model is None:
            from docqa.boundary.genai_clients import create_chat_model
            self._chat_model = create_chat_model(get_settings().models)
        return self._chat_model

    @property
    def document_store(self) -> DocumentStore:
        """Get the process-wide document store."""
        if self._document_store is None:
            from docqa.core.document_store import InMemoryDocumentStore
            self._document_store = InMemoryDocumentStore(
                max_documents=get_settings().store.max_documents,
            )
        return self._document_store

    @property
    def document_service(self) -> DocumentService:
        """Get cached document service."""
        if self._document_service is None:
            from docqa.core.chunker import TextChunker
            from docqa.core.embedder import Embedder

            settings = get_settings()
            self._document_service = DocumentService(
                store=self.document_store,
                chunker=TextChunker(
                    chunk_size=settings.chunking.chunk_size,
                    chunk_overlap=settings.chunking.chunk_overlap,
                ),
                embedder=Embedder(self.embeddings),
            )
        return self._document_service

    @property
    def retrieval_orchestrator(self) -> RetrievalOrchestrator:
        """Get cached retrieval orchestrator."""
        if self._retrieval_orchestrator is None:
            from docqa.core.embedder import Embedder
            from docqa.core.generator import AnswerGenerator

            settings = get_settings()
            self._retrieval_orchestrator = RetrievalOrchestrator(
                store=self.document_store,
                embedder=Embedder(self.embeddings),
                generator=AnswerGenerator(self.chat_model, model_name=settings.models.chat_model),
                default_top_k=settings.retrieval.default_top_k,
            )
        return self._retrieval_orchestrator

    def clear(self) -> None:
        """Clear all cached instances."""
        self._embeddings = None
        self._chat_model = None
        self._document_store = None
        self._document_service = None
        self._retrieval_orchestrator = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_document_service() -> DocumentService:
    """
    Get document service instance.

    Returns:
        DocumentService: Service sharing the process-wide document store
    """
    return get_service_cache().document_service


def get_retrieval_orchestrator() -> RetrievalOrchestrator:
    """
    Get retrieval orchestrator instance.

    Returns:
        RetrievalOrchestrator: Orchestrator sharing the process-wide document store
    """
    return get_service_cache().retrieval_orchestrator
