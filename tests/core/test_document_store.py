"""
Test suite for InMemoryDocumentStore.

System role: Verification of document registry lifecycle
"""

from datetime import datetime, timedelta, timezone

import pytest

from docqa.core.document_store import DocumentStore, InMemoryDocumentStore
from docqa.core.exceptions import DocumentNotFoundError
from docqa.core.vector_index import VectorIndex
from docqa.models.document import DocumentMetadata

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def index(make_chunk) -> VectorIndex:
    return VectorIndex([make_chunk("text", 0)], [[1.0, 0.0]])


def metadata_for(document_id: str, minutes: int = 0) -> DocumentMetadata:
    return DocumentMetadata(
        id=document_id,
        filename=f"{document_id}.pdf",
        chunk_count=1,
        page_count=1,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )


class TestInMemoryDocumentStore:
    """Test suite for registry operations."""

    def test_is_a_document_store(self):
        assert isinstance(InMemoryDocumentStore(), DocumentStore)

    def test_put_then_get(self, index):
        store = InMemoryDocumentStore()

        store.put("doc-1", index, metadata_for("doc-1"))
        stored = store.get("doc-1")

        assert stored.index is index
        assert stored.metadata.filename == "doc-1.pdf"
        assert "doc-1" in store
        assert len(store) == 1

    def test_get_unknown_raises(self):
        with pytest.raises(DocumentNotFoundError) as exc_info:
            InMemoryDocumentStore().get("missing")

        assert exc_info.value.document_id == "missing"
        assert exc_info.value.message == "Document not found"

    def test_list_returns_insertion_order(self, index):
        store = InMemoryDocumentStore()
        store.put("b", index, metadata_for("b", minutes=5))
        store.put("a", index, metadata_for("a", minutes=1))

        assert [metadata.id for metadata in store.list()] == ["b", "a"]

    def test_put_same_id_overwrites(self, index, make_chunk):
        store = InMemoryDocumentStore()
        replacement = VectorIndex([make_chunk("new", 0)], [[0.0, 1.0]])

        store.put("doc-1", index, metadata_for("doc-1"))
        store.put("doc-1", replacement, metadata_for("doc-1", minutes=1))

        assert len(store) == 1
        assert store.get("doc-1").index is replacement

    def test_delete_twice(self, index):
        """
        Test deleting twice.

        Arrange: Register one document
        Act: Delete it twice
        Assert: First succeeds, second raises DocumentNotFoundError
        """
        # Arrange
        store = InMemoryDocumentStore()
        store.put("doc-1", index, metadata_for("doc-1"))

        # Act
        store.delete("doc-1")

        # Assert
        assert "doc-1" not in store
        with pytest.raises(DocumentNotFoundError):
            store.delete("doc-1")

    def test_deleted_index_stays_usable_by_holders(self, index):
        store = InMemoryDocumentStore()
        store.put("doc-1", index, metadata_for("doc-1"))
        held = store.get("doc-1").index

        store.delete("doc-1")

        assert len(held.search([1.0, 0.0], k=1)) == 1


class TestStoreCapacity:
    """Optional oldest-first eviction."""

    def test_unbounded_by_default(self, index):
        store = InMemoryDocumentStore()

        for i in range(50):
            store.put(f"doc-{i}", index, metadata_for(f"doc-{i}", minutes=i))

        assert len(store) == 50

    def test_evicts_oldest_beyond_capacity(self, index):
        store = InMemoryDocumentStore(max_documents=2)

        store.put("doc-1", index, metadata_for("doc-1"))
        store.put("doc-2", index, metadata_for("doc-2"))
        store.put("doc-3", index, metadata_for("doc-3"))

        assert "doc-1" not in store
        assert [metadata.id for metadata in store.list()] == ["doc-2", "doc-3"]

    def test_rejects_invalid_capacity(self):
        with pytest.raises(ValueError):
            InMemoryDocumentStore(max_documents=0)
