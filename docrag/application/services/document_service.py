"""
Document service orchestrator.

Coordinates ingestion: text extraction, indexing and registration.

Dependencies: docrag.boundary.vdb, docrag.core
System role: Document ingestion orchestration
"""

import logging
import re
import time
import uuid
from pathlib import Path

from docrag.boundary.vdb.faiss_index import DocumentIndex
from docrag.core.document_processing.models import IngestionResult
from docrag.core.document_processing.tasks import ParsingTask
from docrag.core.exceptions import DocRAGError
from docrag.core.registry.document_registry import DocumentEntry, DocumentRegistry

logger = logging.getLogger(__name__)

_UNSAFE_ID_CHARS = re.compile(r"[^A-Za-z0-9_-]+")


def make_document_id(filename: str) -> str:
    """
    Derive a distinguishable document ID (the stored filename) from an upload name.

    Args:
        filename: Original upload filename

    Returns:
        str: Slugified stem, random suffix and original extension
            (e.g. ``report-3f2a9c1b7d4e.pdf``)
    """
    path = Path(filename)
    stem = _UNSAFE_ID_CHARS.sub("-", path.stem).strip("-").lower()[:48] or "document"
    extension = _UNSAFE_ID_CHARS.sub("", path.suffix.lower().lstrip("."))
    document_id = f"{stem}-{uuid.uuid4().hex[:12]}"
    return f"{document_id}.{extension}" if extension else document_id


class DocumentService:
    """
    Document service orchestrator.

    Uses the shared DocumentIndex for indexing and the DocumentRegistry
    for bookkeeping. A document is registered only after its chunks are
    committed to the index.
    """

    def __init__(
        self,
        index: DocumentIndex,
        registry: DocumentRegistry,
        parser: ParsingTask | None = None,
    ) -> None:
        """
        Initialize document service.

        Args:
            index: Shared document index handle
            registry: Shared document registry
            parser: PDF text extractor (created if None)
        """
        self._index = index
        self._registry = registry
        self._parser = parser or ParsingTask()

    async def ingest_text(
        self,
        text: str,
        filename: str,
        document_id: str | None = None,
    ) -> IngestionResult:
        """
        Index already-extracted text and register the document.

        Index commits happen before registration. If registering fails the
        chunks stay searchable under doc_id but the document is not listed;
        the failure is logged with the document ID and re-raised.

        Args:
            text: Plain text of the document
            filename: Filename recorded in the registry
            document_id: Caller-chosen ID (derived from filename if None)

        Returns:
            IngestionResult: Document ID, chunk count and timing

        Raises:
            DocRAGError: VALIDATION, NO_CONTENT, provider or persistence errors
        """
        start_time = time.perf_counter()
        doc_id = document_id or make_document_id(filename)

        await self._index.add_document(text, doc_id)
        chunk_count = self._index.document_record_count(doc_id)
        try:
            await self._registry.register(doc_id, filename, chunk_count=chunk_count)
        except DocRAGError as e:
            logger.error(
                "Document indexed but not registered",
                extra={
                    "document_id": doc_id,
                    "chunk_count": chunk_count,
                    "error_kind": e.kind.value,
                },
            )
            raise

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            "Document ingested",
            extra={"document_id": doc_id, "chunk_count": chunk_count, "processing_time_ms": round(elapsed_ms, 2)},
        )
        return IngestionResult(
            document_id=doc_id,
            filename=filename,
            chunk_count=chunk_count,
            processing_time_ms=elapsed_ms,
        )

    async def ingest_pdf(
        self,
        file_path: str,
        filename: str,
        document_id: str | None = None,
    ) -> IngestionResult:
        """
        Extract text from a PDF file and ingest it.

        Args:
            file_path: Path to the saved upload
            filename: Original upload filename
            document_id: Caller-chosen ID (derived from filename if None)

        Returns:
            IngestionResult: Document ID, chunk count and timing
        """
        text = await self._parser.aparse(file_path)
        return await self.ingest_text(text, filename, document_id)

    def list_documents(self) -> list[DocumentEntry]:
        """Registered documents in ingestion order."""
        return self._registry.list_documents()
