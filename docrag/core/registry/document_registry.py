"""
Document registry.

Maps document IDs to filenames for successfully ingested documents so
callers can list documents and pin questions to one of them. Entries are
only ever added. Optionally mirrored to a JSON file so listings survive
restarts alongside the persisted index.

Dependencies: pydantic
System role: Bookkeeping of valid document IDs
"""

import asyncio
import logging
import os
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, Field, TypeAdapter

from docrag.core.exceptions import DocRAGError, ErrorKind

logger = logging.getLogger(__name__)


class DocumentEntry(BaseModel):
    """One ingested document."""

    document_id: str = Field(description="Identifier stamped on the document's chunks")
    filename: str = Field(description="Original upload filename")
    chunk_count: int = Field(default=0, description="Number of chunks indexed")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


_ENTRIES = TypeAdapter(list[DocumentEntry])


class DocumentRegistry:
    """In-process document_id -> filename registry."""

    def __init__(self, persist_path: str | Path | None = None) -> None:
        """
        Initialize registry, loading persisted entries if present.

        Args:
            persist_path: JSON file mirroring the registry (None keeps it in memory)
        """
        self._persist_path = Path(persist_path) if persist_path else None
        self._entries: dict[str, DocumentEntry] = {}
        self._lock = asyncio.Lock()
        self._load()

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, document_id: str) -> DocumentEntry | None:
        return self._entries.get(document_id)

    def list_documents(self) -> list[DocumentEntry]:
        """Entries in registration order."""
        return list(self._entries.values())

    async def register(
        self,
        document_id: str,
        filename: str,
        chunk_count: int = 0,
    ) -> DocumentEntry:
        """
        Record a successfully ingested document.

        Re-registering an ID replaces its filename, matching re-ingestion
        appending new records under the same ID.

        Args:
            document_id: Document identifier
            filename: Stored filename
            chunk_count: Chunks indexed for this ingestion

        Returns:
            DocumentEntry: The stored entry

        Raises:
            DocRAGError: PERSISTENCE when the JSON mirror cannot be written
        """
        entry = DocumentEntry(document_id=document_id, filename=filename, chunk_count=chunk_count)
        async with self._lock:
            previous = self._entries.get(document_id)
            self._entries[document_id] = entry
            try:
                await asyncio.to_thread(self._save)
            except DocRAGError:
                if previous is None:
                    del self._entries[document_id]
                else:
                    self._entries[document_id] = previous
                raise

        logger.info("Registered document", extra={"document_id": document_id, "doc_filename": filename})
        return entry

    def _load(self) -> None:
        if self._persist_path is None or not self._persist_path.is_file():
            return
        try:
            entries = _ENTRIES.validate_json(self._persist_path.read_bytes())
        except Exception as e:
            logger.exception("Failed to load document registry", extra={"path": str(self._persist_path)})
            raise DocRAGError(
                ErrorKind.PERSISTENCE,
                f"Failed to load document registry: {e}",
                {"path": str(self._persist_path)},
            ) from e
        self._entries = {entry.document_id: entry for entry in entries}
        logger.info("Loaded document registry", extra={"document_count": len(entries)})

    def _save(self) -> None:
        if self._persist_path is None:
            return
        tmp_path = self._persist_path.with_suffix(self._persist_path.suffix + ".tmp")
        try:
            self._persist_path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(_ENTRIES.dump_json(list(self._entries.values()), indent=2))
            os.replace(tmp_path, self._persist_path)
        except Exception as e:
            logger.exception("Failed to save document registry", extra={"path": str(self._persist_path)})
            raise DocRAGError(
                ErrorKind.PERSISTENCE,
                f"Failed to save document registry: {e}",
                {"path": str(self._persist_path)},
            ) from e
