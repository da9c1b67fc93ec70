"""
Retrieval orchestration.

Answers a question against one registered document: validate, look up,
embed the question, search the index, build the prompt, generate.

Dependencies: docqa.core (store, embedder, generator, prompts)
System role: Query-time RAG pipeline
"""

import logging
import time

from docqa.core.document_store import DocumentStore
from docqa.core.embedder import Embedder
from docqa.core.exceptions import ValidationError
from docqa.core.generator import AnswerGenerator
from docqa.core.prompts import build_answer_prompt
from docqa.models.query import AnswerResult, DocumentSummary, SourceChunk
from docqa.observability.log_utils import clip_for_log

logger = logging.getLogger(__name__)


class RetrievalOrchestrator:
    """Compose vector search, prompt construction and generation."""

    def __init__(
        self,
        store: DocumentStore,
        embedder: Embedder,
        generator: AnswerGenerator,
        default_top_k: int = 3,
    ) -> None:
        """
        Initialize orchestrator with its collaborators.

        Args:
            store: Registry of ingested documents
            embedder: Embedder shared with ingestion
            generator: Answer generator
            default_top_k: Chunks retrieved when the caller gives no topK
        """
        self._store = store
        self._embedder = embedder
        self._generator = generator
        self._default_top_k = default_top_k

    async def answer(
        self,
        document_id: str,
        question: str,
        top_k: int | None = None,
    ) -> AnswerResult:
        """
        Answer a question using context from one document.

        Args:
            document_id: Registered document ID
            question: Natural-language question
            top_k: Number of chunks to retrieve

        Returns:
            AnswerResult: Answer plus the chunks it was grounded on

        Raises:
            ValidationError: Empty question or top_k < 1
            DocumentNotFoundError: Unknown document ID
            EmbeddingError: Question embedding failed
            GenerationError: Answer generation failed
        """
        if not question or not question.strip():
            raise ValidationError("Question is required", field="question")

        k = self._default_top_k if top_k is None else top_k
        if k < 1:
            raise ValidationError("topK must be at least 1", field="topK", details={"topK": k})

        stored = self._store.get(document_id)
        start_time = time.perf_counter()

        logger.info(
            "Answering question",
            extra={
                "document_id": document_id,
                "question": clip_for_log(question),
                "top_k": k,
            },
        )

        query_vector = await self._embedder.embed_query(question)
        results = stored.index.search(query_vector, k)
        prompt = build_answer_prompt(question, [result.chunk for result in results])
        answer = await self._generator.generate(prompt)

        logger.info(
            "Question answered",
            extra={
                "document_id": document_id,
                "source_count": len(results),
                "processing_time_ms": round((time.perf_counter() - start_time) * 1000, 2),
            },
        )

        return AnswerResult(
            question=question,
            answer=answer,
            sources=[
                SourceChunk(
                    content=result.chunk.content,
                    metadata=result.chunk.metadata,
                    score=result.score,
                )
                for result in results
            ],
            document=DocumentSummary(
                filename=stored.metadata.filename,
                total_chunks=stored.metadata.chunk_count,
            ),
        )
