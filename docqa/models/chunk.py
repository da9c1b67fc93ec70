"""
Chunk domain model.

Represents a document chunk with deterministic ID and its source metadata,
plus the scored result returned by vector search.

Dependencies: pydantic
System role: Document chunk data structure
"""

from pydantic import BaseModel, ConfigDict, Field


class Chunk(BaseModel):
    """Contiguous text span of a document."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Deterministic chunk identifier (hash)")
    content: str = Field(description="Chunk text content")
    metadata: dict = Field(
        default_factory=dict,
        description="Chunk metadata (page, start_index, source, chunk_index)",
    )

    @property
    def page(self) -> int | None:
        return self.metadata.get("page")

    @property
    def start_index(self) -> int:
        return self.metadata.get("start_index", 0)


class SearchResult(BaseModel):
    """Single result from a vector index search."""

    chunk: Chunk = Field(description="Matched chunk")
    score: float = Field(description="Cosine similarity score (-1.0 to 1.0)")
