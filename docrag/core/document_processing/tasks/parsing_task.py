"""
PDF text extraction using LangChain PyPDFLoader.

Converts an uploaded PDF into one plain-text string for chunking.

Dependencies: langchain_community.document_loaders
System role: Ingestion boundary (binary document to plain text)
"""

import asyncio
import logging
from pathlib import Path

from langchain_community.document_loaders import PyPDFLoader

from docrag.core.exceptions import DocRAGError, ErrorKind

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"


class ParsingTask:
    """Extract plain text from PDF documents."""

    def parse(self, file_path: str) -> str:
        """
        Extract the text of every page, joined by blank lines.

        Args:
            file_path: Path to PDF document

        Returns:
            str: Extracted text (may be blank for scanned documents)

        Raises:
            DocRAGError: VALIDATION for missing, non-PDF or unreadable files
        """
        path = Path(file_path)
        if not path.exists():
            raise DocRAGError.validation(f"File not found: {file_path}", field="file")

        if path.suffix.lower() != ".pdf":
            raise DocRAGError.validation(
                f"Unsupported file format: {path.suffix}. Only PDF files are supported.",
                field="file",
            )

        try:
            pages = PyPDFLoader(str(path)).load()
        except Exception as e:
            logger.exception("Failed to parse PDF", extra={"file_path": file_path})
            raise DocRAGError(
                ErrorKind.VALIDATION,
                f"Failed to load PDF file: {e}",
                {"file_path": file_path},
            ) from e

        logger.info("Parsed PDF", extra={"file_path": file_path, "page_count": len(pages)})
        return PAGE_SEPARATOR.join(page.page_content for page in pages)

    async def aparse(self, file_path: str) -> str:
        """Async version of parse (runs the blocking loader in a thread)."""
        return await asyncio.to_thread(self.parse, file_path)
