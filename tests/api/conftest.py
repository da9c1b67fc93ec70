"""
API test fixtures.

Builds the app with dependency overrides so every endpoint shares one
in-memory store, fake embeddings and a fake chat model.

Dependencies: pytest, fastapi.testclient
System role: HTTP test harness
"""

import tempfile
import uuid
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from docqa.api.deps import (
    get_document_service,
    get_retrieval_orchestrator,
    get_settings_dependency,
)
from docqa.application.document_service import DocumentService
from docqa.configs import Settings
from docqa.configs.ingestion import UploadSettings
from docqa.core.chunker import TextChunker
from docqa.core.document_store import InMemoryDocumentStore
from docqa.core.generator import AnswerGenerator
from docqa.core.retrieval import RetrievalOrchestrator
from docqa.main import create_app

FAKE_ANSWER = "## Answer\n\n- The document covers **photosynthesis**."


@pytest.fixture
def fake_answer() -> str:
    """Answer returned by the fake chat model."""
    return FAKE_ANSWER


@pytest.fixture
def temp_prefix() -> str:
    """Unique temp directory prefix so leftovers can be detected."""
    return f"docqa_test_{uuid.uuid4().hex[:8]}_"


@pytest.fixture
def leftover_temp_dirs(temp_prefix):
    """Return a callable listing temp dirs created with this test's prefix."""

    def _list() -> list[Path]:
        return list(Path(tempfile.gettempdir()).glob(f"{temp_prefix}*"))

    return _list


@pytest.fixture
def settings(temp_prefix) -> Settings:
    return Settings(upload=UploadSettings(max_bytes=5 * 1024 * 1024, temp_prefix=temp_prefix))


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def document_service(store, fake_embedder) -> DocumentService:
    return DocumentService(store=store, chunker=TextChunker(), embedder=fake_embedder)


@pytest.fixture
def orchestrator(store, fake_embedder) -> RetrievalOrchestrator:
    generator = AnswerGenerator(FakeListChatModel(responses=[FAKE_ANSWER]))
    return RetrievalOrchestrator(store, fake_embedder, generator, default_top_k=3)


@pytest.fixture
def app(settings, document_service, orchestrator):
    app = create_app()
    app.dependency_overrides[get_settings_dependency] = lambda: settings
    app.dependency_overrides[get_document_service] = lambda: document_service
    app.dependency_overrides[get_retrieval_orchestrator] = lambda: orchestrator
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def upload_pdf(client, pdf_bytes_factory):
    """Upload a generated PDF and return the HTTP response."""

    def _upload(pages: list[str], filename: str = "lecture.pdf"):
        return client.post(
            "/upload-pdf",
            files={"pdf": (filename, pdf_bytes_factory(pages), "application/pdf")},
        )

    return _upload
