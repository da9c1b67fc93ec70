"""
Core domain layer.

Chunking, vector indexing, document registry and retrieval orchestration.
"""

from docqa.core.chunker import ChunkSequence, TextChunker
from docqa.core.document_store import DocumentStore, InMemoryDocumentStore, StoredDocument
from docqa.core.embedder import Embedder
from docqa.core.generator import AnswerGenerator
from docqa.core.pdf_parser import PdfParser
from docqa.core.retrieval import RetrievalOrchestrator
from docqa.core.vector_index import VectorIndex

__all__ = [
    "AnswerGenerator",
    "ChunkSequence",
    "DocumentStore",
    "Embedder",
    "InMemoryDocumentStore",
    "PdfParser",
    "RetrievalOrchestrator",
    "StoredDocument",
    "TextChunker",
    "VectorIndex",
]
