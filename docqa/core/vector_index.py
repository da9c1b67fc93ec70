"""
In-memory vector index for a single document.

Holds one normalized embedding per chunk and answers exact
nearest-neighbour queries by cosine similarity.

Dependencies: numpy, docqa.core.embedder
System role: Per-document retrieval structure
"""

import logging

import numpy as np

from docqa.core.embedder import Embedder
from docqa.core.exceptions import EmbeddingError, ValidationError
from docqa.models.chunk import Chunk, SearchResult

logger = logging.getLogger(__name__)


def _normalize_rows(matrix: np.ndarray) -> np.ndarray:
    """Scale rows to unit length; zero rows stay zero."""
    norms = np.linalg.norm(matrix, axis=1, keepdims=True)
    safe = np.where(norms == 0.0, 1.0, norms)
    return matrix / safe


class VectorIndex:
    """
    Ordered (chunk, vector) pairs for one document.

    Vectors are stored normalized and read-only, so a built index never
    changes and can be shared by concurrent queries.
    """

    def __init__(self, chunks: list[Chunk], vectors) -> None:
        """
        Args:
            chunks: Chunks in document order
            vectors: One embedding per chunk

        Raises:
            EmbeddingError: When vectors are ragged or do not match the chunks
        """
        try:
            matrix = np.asarray(vectors, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise EmbeddingError(f"Embeddings have inconsistent dimensions: {e}") from e

        if matrix.ndim != 2 or matrix.shape[0] != len(chunks) or matrix.shape[1] == 0:
            raise EmbeddingError(
                "Embeddings do not form one vector per chunk",
                details={"chunks": len(chunks), "shape": list(matrix.shape)},
            )

        self._chunks = list(chunks)
        self._vectors = _normalize_rows(matrix)
        self._vectors.setflags(write=False)

    @classmethod
    async def build(cls, chunks: list[Chunk], embedder: Embedder) -> "VectorIndex":
        """
        Embed all chunks in one batch and build the index.

        Args:
            chunks: Chunks to index
            embedder: Embedder used for document vectors

        Returns:
            VectorIndex: Fully populated index

        Raises:
            ValidationError: When chunks is empty
            EmbeddingError: When embedding fails or returns malformed vectors
        """
        if not chunks:
            raise ValidationError("Cannot build an index without chunks", field="chunks")

        vectors = await embedder.embed_documents([chunk.content for chunk in chunks])
        index = cls(chunks, vectors)
        logger.debug(
            "Built vector index",
            extra={"chunk_count": len(index), "dimension": index.dimension},
        )
        return index

    def __len__(self) -> int:
        return len(self._chunks)

    @property
    def chunks(self) -> list[Chunk]:
        return list(self._chunks)

    @property
    def dimension(self) -> int:
        return int(self._vectors.shape[1])

    def search(self, query_vector, k: int) -> list[SearchResult]:
        """
        Find the k chunks most similar to a query vector.

        Args:
            query_vector: Query embedding
            k: Number of results (k larger than the index returns everything)

        Returns:
            list[SearchResult]: Descending by score, ties in chunk order

        Raises:
            ValidationError: When k < 1
            EmbeddingError: When the query dimension differs from the index
        """
        if k < 1:
            raise ValidationError("topK must be at least 1", field="topK", details={"topK": k})

        query = np.asarray(query_vector, dtype=np.float64)
        if query.ndim != 1 or query.shape[0] != self.dimension:
            raise EmbeddingError(
                "Query vector dimension does not match index",
                details={"expected": self.dimension, "received": list(query.shape)},
            )

        norm = np.linalg.norm(query)
        if norm == 0.0:
            scores = np.zeros(len(self._chunks))
        else:
            scores = self._vectors @ (query / norm)

        order = np.argsort(-scores, kind="stable")[:k]
        return [
            SearchResult(chunk=self._chunks[i], score=float(scores[i]))
            for i in order
        ]
