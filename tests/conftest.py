"""
Shared test fixtures and configuration for entire test suite.

Provides: PDF byte builders, fake embedding models, chunk factories
Dependencies: pytest, langchain_core
System role: Test infrastructure and fixture management
"""

import textwrap
from pathlib import Path
from typing import Callable

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding, Embeddings

from docqa.core.embedder import Embedder
from docqa.models.chunk import Chunk


def _escape_pdf_text(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_pdf(pages: list[str]) -> bytes:
    """
    Build a minimal text PDF with one Helvetica text block per page.

    Args:
        pages: Text of each page (blank string for an empty page)

    Returns:
        bytes: PDF file content with a valid xref table
    """
    page_count = len(pages)
    kids = " ".join(f"{4 + 2 * i} 0 R" for i in range(page_count))

    objects: list[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {page_count} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for i, text in enumerate(pages):
        operations = ["BT", "/F1 10 Tf", "12 TL", "50 750 Td"]
        operations += [f"({_escape_pdf_text(line)}) Tj T*" for line in textwrap.wrap(text, 90)]
        operations.append("ET")
        stream = "\n".join(operations).encode("latin-1")

        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {5 + 2 * i} 0 R >>"
            ).encode()
        )
        objects.append(b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream")

    output = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(output))
        output += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"

    xref_offset = len(output)
    output += f"xref\n0 {len(objects) + 1}\n".encode()
    output += b"0000000000 65535 f \n"
    for offset in offsets:
        output += f"{offset:010d} 00000 n \n".encode()
    output += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_offset}\n%%EOF\n"
    ).encode()
    return bytes(output)


def filler_text(topic: str, length: int) -> str:
    """Readable filler text of roughly `length` characters about a topic."""
    sentence = f"This page discusses {topic} in plain words for testing purposes. "
    repeats = length // len(sentence) + 1
    return (sentence * repeats)[:length].rstrip()


class KeywordEmbeddings(Embeddings):
    """Counts vocabulary words; similar texts share keywords."""

    def __init__(self, vocabulary: list[str]) -> None:
        self.vocabulary = [word.lower() for word in vocabulary]

    def _vector(self, text: str) -> list[float]:
        lowered = text.lower()
        return [float(lowered.count(word)) for word in self.vocabulary]

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [self._vector(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:
        return self._vector(text)


@pytest.fixture
def pdf_bytes_factory() -> Callable[[list[str]], bytes]:
    """Provide the PDF builder."""
    return build_pdf


@pytest.fixture
def pdf_file_factory(tmp_path: Path) -> Callable[..., Path]:
    """Write built PDFs into the test's temp directory."""

    def _write(pages: list[str], name: str = "document.pdf") -> Path:
        path = tmp_path / name
        path.write_bytes(build_pdf(pages))
        return path

    return _write


@pytest.fixture
def three_page_texts() -> list[str]:
    """About 2500 characters spread over three pages."""
    return [
        filler_text("photosynthesis", 840),
        filler_text("plate tectonics", 840),
        filler_text("orbital mechanics", 840),
    ]


@pytest.fixture
def fake_embeddings() -> DeterministicFakeEmbedding:
    """Provide deterministic 16-dimensional fake embeddings."""
    return DeterministicFakeEmbedding(size=16)


@pytest.fixture
def fake_embedder(fake_embeddings: DeterministicFakeEmbedding) -> Embedder:
    """Provide Embedder backed by deterministic fake embeddings."""
    return Embedder(fake_embeddings)


@pytest.fixture
def keyword_embedder() -> Embedder:
    """Provide Embedder whose vectors count science keywords."""
    return Embedder(KeywordEmbeddings(["photosynthesis", "tectonics", "orbit", "chlorophyll"]))


@pytest.fixture
def make_chunk() -> Callable[..., Chunk]:
    """Provide a chunk factory."""

    def _make(content: str, index: int = 0, page: int = 1) -> Chunk:
        return Chunk(
            id=f"chunk-{index}",
            content=content,
            metadata={"page": page, "start_index": 0, "source": "test.pdf", "chunk_index": index},
        )

    return _make
