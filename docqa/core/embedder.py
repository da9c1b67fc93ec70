"""
Embedding capability wrapper.

Adapts a LangChain Embeddings implementation to the ingestion and query
paths, turning provider failures into EmbeddingError.

Dependencies: langchain_core.embeddings
System role: Vector computation for chunks and questions
"""

import logging

from langchain_core.embeddings import Embeddings

from docqa.core.exceptions import EmbeddingError

logger = logging.getLogger(__name__)


class Embedder:
    """Compute document and query vectors with one embedding model."""

    def __init__(self, embeddings: Embeddings) -> None:
        """
        Args:
            embeddings: LangChain embeddings client (Gemini in production, fakes in tests)
        """
        self._embeddings = embeddings

    async def embed_documents(self, texts: list[str]) -> list[list[float]]:
        """
        Embed chunk texts in a single batched call.

        Args:
            texts: Chunk contents

        Returns:
            list[list[float]]: One vector per text, in order

        Raises:
            EmbeddingError: When the provider fails or returns the wrong count
        """
        if not texts:
            return []

        try:
            vectors = await self._embeddings.aembed_documents(texts)
        except Exception as e:
            logger.error(
                "Document embedding failed",
                extra={"text_count": len(texts), "error": str(e)},
            )
            raise EmbeddingError(f"Failed to embed documents: {e}") from e

        if len(vectors) != len(texts):
            raise EmbeddingError(
                "Embedding count does not match chunk count",
                details={"expected": len(texts), "received": len(vectors)},
            )
        return vectors

    async def embed_query(self, text: str) -> list[float]:
        """
        Embed a question using the retrieval query variant.

        Raises:
            EmbeddingError: When the provider fails
        """
        try:
            return await self._embeddings.aembed_query(text)
        except Exception as e:
            logger.error("Query embedding failed", extra={"error": str(e)})
            raise EmbeddingError(f"Failed to embed query: {e}") from e
