"""
Query domain models and schemas.

Request/response schemas for asking questions about a document and the
structured answer produced by the retrieval orchestrator.

Dependencies: pydantic
System role: Query API contracts
"""

from pydantic import BaseModel, ConfigDict, Field


class QueryRequest(BaseModel):
    """Request schema for POST /query/{document_id}."""

    model_config = ConfigDict(populate_by_name=True)

    # Empty default so a missing question is reported by the orchestrator as 400
    question: str = Field(default="", description="Natural-language question")
    top_k: int | None = Field(
        default=None,
        alias="topK",
        description="Number of chunks to retrieve (default from settings)",
    )


class SourceChunk(BaseModel):
    """Chunk used as context for an answer."""

    content: str = Field(description="Chunk text")
    metadata: dict = Field(default_factory=dict, description="Originating page/offset metadata")
    score: float = Field(description="Cosine similarity to the question")


class DocumentSummary(BaseModel):
    """Summary of the document an answer was drawn from."""

    model_config = ConfigDict(populate_by_name=True)

    filename: str
    total_chunks: int = Field(alias="totalChunks")


class AnswerResult(BaseModel):
    """Structured answer returned by RetrievalOrchestrator."""

    question: str
    answer: str
    sources: list[SourceChunk] = Field(default_factory=list)
    document: DocumentSummary


class QueryResponse(BaseModel):
    """Response schema for POST /query/{document_id}."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    question: str
    answer: str
    sources: list[SourceChunk]
    document_info: DocumentSummary = Field(alias="documentInfo")

    @classmethod
    def from_answer(cls, result: AnswerResult) -> "QueryResponse":
        """Map orchestrator result to the HTTP response."""
        return cls(
            question=result.question,
            answer=result.answer,
            sources=result.sources,
            document_info=result.document,
        )
