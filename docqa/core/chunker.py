"""
Text chunking using RecursiveCharacterTextSplitter.

Splits extracted document text into overlapping, size-bounded chunks.
Separators are kept and whitespace is not stripped, so chunk offsets map
back exactly and every non-blank stretch of the input lands in a chunk.

Dependencies: langchain_text_splitters, langchain_core
System role: Second stage of document ingestion pipeline
"""

import hashlib
from collections.abc import Iterator
from typing import Any

from langchain_core.documents import Document
from langchain_text_splitters import RecursiveCharacterTextSplitter

from docqa.core.exceptions import ValidationError
from docqa.models.chunk import Chunk

DEFAULT_SEPARATORS = ["\n\n", "\n", " ", ""]


def generate_chunk_id(content: str, metadata: dict) -> str:
    """
    Generate deterministic chunk ID from content and metadata.

    Args:
        content: Chunk text content
        metadata: Chunk metadata

    Returns:
        str: SHA-256 hash prefix (16 chars)
    """
    source = metadata.get("source", "")
    page = metadata.get("page", "")
    start_index = metadata.get("start_index", 0)
    hash_input = f"{content}:{source}:{page}:{start_index}"
    return hashlib.sha256(hash_input.encode()).hexdigest()[:16]


def locate_pieces(text: str, pieces: list[str], chunk_overlap: int) -> list[int]:
    """
    Find where each split piece starts in the source text.

    The splitter emits pieces in order. Each one starts after the previous
    start and no later than the previous end, shares at most chunk_overlap
    characters with it, and extends past it; the last piece ends at the end
    of the text. A single forward find() can settle on an earlier repeat of
    a short piece, so every feasible start is tracked per piece and the
    chosen path is rebuilt backwards from the end of the text.

    Args:
        text: Text that was split
        pieces: Splitter output for text
        chunk_overlap: Maximum overlap between consecutive pieces

    Returns:
        list[int]: Start offset of each piece
    """
    if not pieces:
        return []

    # layers[i] maps a feasible start of piece i to the start of piece i - 1
    layers: list[dict[int, int]] = [{0: 0}]
    for previous, piece in zip(pieces, pieces[1:]):
        layer: dict[int, int] = {}
        for previous_start in sorted(layers[-1]):
            previous_end = previous_start + len(previous)
            lowest = max(
                previous_start + 1,
                previous_end - chunk_overlap,
                previous_end - len(piece) + 1,
            )
            start = text.find(piece, lowest)
            while start != -1 and start <= previous_end:
                layer.setdefault(start, previous_start)
                start = text.find(piece, start + 1)
        if not layer:
            raise ValueError(f"Split piece not found in source text after offset {min(layers[-1])}")
        layers.append(layer)

    ending = [start for start in layers[-1] if start + len(pieces[-1]) == len(text)]
    start = min(ending or layers[-1])
    offsets = [start]
    for layer in reversed(layers[1:]):
        start = layer[start]
        offsets.append(start)
    return offsets[::-1]


class ChunkSequence:
    """
    Lazy, restartable sequence of chunks for one text.

    Splitting happens on iteration; every new iteration starts over from the
    beginning of the text. Whitespace-only pieces are skipped.
    """

    def __init__(
        self,
        text: str,
        splitter: RecursiveCharacterTextSplitter,
        chunk_overlap: int,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        self._text = text
        self._splitter = splitter
        self._chunk_overlap = chunk_overlap
        self._metadata = metadata or {}

    def __iter__(self) -> Iterator[Chunk]:
        if not self._text.strip():
            return

        pieces = self._splitter.split_text(self._text)
        offsets = locate_pieces(self._text, pieces, self._chunk_overlap)
        for piece, start_index in zip(pieces, offsets):
            if not piece.strip():
                continue

            metadata = {**self._metadata, "start_index": start_index}
            yield Chunk(
                id=generate_chunk_id(piece, metadata),
                content=piece,
                metadata=metadata,
            )

    def __len__(self) -> int:
        return sum(1 for _ in self)


class TextChunker:
    """Split text into chunks using RecursiveCharacterTextSplitter."""

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
    ) -> None:
        """
        Initialize chunker with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks

        Raises:
            ValidationError: When sizes are out of range
        """
        if chunk_size < 1:
            raise ValidationError(
                "chunk_size must be positive",
                field="chunk_size",
                details={"chunk_size": chunk_size},
            )
        if chunk_overlap < 0 or chunk_overlap >= chunk_size:
            raise ValidationError(
                "chunk_overlap must be non-negative and smaller than chunk_size",
                field="chunk_overlap",
                details={"chunk_size": chunk_size, "chunk_overlap": chunk_overlap},
            )

        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            separators=DEFAULT_SEPARATORS,
            keep_separator=True,
            strip_whitespace=False,
            length_function=len,
        )

    def split(self, text: str, metadata: dict[str, Any] | None = None) -> ChunkSequence:
        """
        Split a single text into chunks.

        Args:
            text: Text to split
            metadata: Metadata copied onto every chunk

        Returns:
            ChunkSequence: Lazy sequence of chunks (empty for blank text)
        """
        return ChunkSequence(text, self._splitter, self.chunk_overlap, metadata)

    def split_pages(self, pages: list[Document]) -> list[Chunk]:
        """
        Split parsed pages into chunks without crossing page boundaries.

        Args:
            pages: One LangChain Document per page

        Returns:
            list[Chunk]: Chunks with page, start_index, source and chunk_index metadata
        """
        chunks: list[Chunk] = []
        for position, page in enumerate(pages):
            page_metadata = {
                "source": page.metadata.get("source", ""),
                "page": page.metadata.get("page", position + 1),
            }
            for chunk in self.split(page.page_content, page_metadata):
                metadata = {**chunk.metadata, "chunk_index": len(chunks)}
                chunks.append(chunk.model_copy(update={"metadata": metadata}))
        return chunks
