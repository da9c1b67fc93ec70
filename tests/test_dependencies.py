"""
Test suite for dependency injection container.

Tests ServiceCache lazy construction and the FastAPI dependency functions.
External Gemini clients are patched out.

System role: Verification of DI container
"""

from unittest.mock import patch

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from docqa.api.deps import (
    ServiceCache,
    get_document_service,
    get_retrieval_orchestrator,
    get_service_cache,
    get_settings_dependency,
)
from docqa.application.document_service import DocumentService
from docqa.configs import Settings
from docqa.core.retrieval import RetrievalOrchestrator


@pytest.fixture
def patched_clients():
    """Replace Gemini client factories with fakes."""
    with patch(
        "docqa.boundary.genai_clients.create_embeddings",
        return_value=DeterministicFakeEmbedding(size=8),
    ) as embeddings_factory, patch(
        "docqa.boundary.genai_clients.create_chat_model",
        return_value=FakeListChatModel(responses=["ok"]),
    ) as chat_factory:
        yield embeddings_factory, chat_factory


class TestServiceCache:
    """Test suite for ServiceCache."""

    def test_services_share_one_store(self, patched_clients):
        """
        Test ingestion and retrieval see the same registry.

        Arrange: Fresh cache with fake clients
        Act: Build both services
        Assert: Same store instance behind each
        """
        # Arrange
        cache = ServiceCache()

        # Act
        service = cache.document_service
        orchestrator = cache.retrieval_orchestrator

        # Assert
        assert isinstance(service, DocumentService)
        assert isinstance(orchestrator, RetrievalOrchestrator)
        assert service._store is cache.document_store
        assert orchestrator._store is cache.document_store

    def test_instances_are_cached(self, patched_clients):
        embeddings_factory, chat_factory = patched_clients
        cache = ServiceCache()

        assert cache.document_service is cache.document_service
        assert cache.retrieval_orchestrator is cache.retrieval_orchestrator
        embeddings_factory.assert_called_once()
        chat_factory.assert_called_once()

    def test_clear_drops_instances(self, patched_clients):
        cache = ServiceCache()
        store = cache.document_store

        cache.clear()

        assert cache.document_store is not store

    def test_store_is_not_built_from_clients(self, patched_clients):
        embeddings_factory, chat_factory = patched_clients

        ServiceCache().document_store

        embeddings_factory.assert_not_called()
        chat_factory.assert_not_called()


class TestDependencyFunctions:
    """FastAPI dependency providers."""

    def test_providers_use_global_cache(self, patched_clients):
        cache = get_service_cache()
        try:
            assert get_document_service() is cache.document_service
            assert get_retrieval_orchestrator() is cache.retrieval_orchestrator
        finally:
            cache.clear()

    def test_settings_dependency(self):
        assert isinstance(get_settings_dependency(), Settings)
