"""
PDF parsing using LangChain PyPDFLoader.

Converts an uploaded PDF into one LangChain Document per page.

Dependencies: langchain_community.document_loaders, pypdf
System role: First stage of document ingestion pipeline
"""

from pathlib import Path

from langchain_community.document_loaders import PyPDFLoader
from langchain_core.documents import Document

from docqa.core.exceptions import EmptyDocumentError, ExtractionError


class PdfParser:
    """Parse PDF documents into per-page LangChain Documents."""

    def parse(self, file_path: str) -> list[Document]:
        """
        Parse PDF document into LangChain Documents.

        Args:
            file_path: Path to PDF document

        Returns:
            list[Document]: One document per page, metadata page is 1-based

        Raises:
            ExtractionError: When the file is missing or unreadable
            EmptyDocumentError: When no page yields any text
        """
        path = Path(file_path)
        if not path.exists():
            raise ExtractionError(f"File not found: {file_path}", file_path=file_path)

        if path.suffix.lower() != ".pdf":
            raise ExtractionError(
                f"Unsupported file format: {path.suffix}. Only PDF files are supported.",
                file_path=file_path,
            )

        try:
            documents = PyPDFLoader(file_path).load()
        except Exception as e:
            raise ExtractionError(f"Failed to parse PDF: {e}", file_path=file_path) from e

        if not any(doc.page_content.strip() for doc in documents):
            raise EmptyDocumentError(file_path=file_path)

        for position, doc in enumerate(documents):
            # PyPDFLoader numbers pages from 0
            doc.metadata["page"] = doc.metadata.get("page", position) + 1
        return documents
