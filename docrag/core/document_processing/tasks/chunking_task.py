"""
Sliding-window text chunking.

Splits extracted document text into overlapping fixed-size windows.
Output is a pure function of (text, chunk_size, overlap) so re-indexing
the same text always produces the same chunks.

Dependencies: docrag.core.document_processing.models, docrag.core.exceptions
System role: First stage of document ingestion
"""

import logging

from docrag.core.document_processing.models import Chunk
from docrag.core.exceptions import DocRAGError

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 2000
DEFAULT_CHUNK_OVERLAP = 200
DEFAULT_MAX_CHUNKS = 50_000


def chunk_text(
    text: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    overlap: int = DEFAULT_CHUNK_OVERLAP,
    max_chunks: int = DEFAULT_MAX_CHUNKS,
) -> list[str]:
    """
    Split text into consecutive overlapping windows.

    Overlap is clamped to half the chunk size so every step moves the
    window forward. Windows that are blank after trimming are skipped;
    emitted windows keep their original characters.

    Args:
        text: Extracted document text
        chunk_size: Window size in characters
        overlap: Characters shared by consecutive windows
        max_chunks: Hard cap; chunking stops with a warning once reached

    Returns:
        list[str]: Chunks in document order (empty for blank input)

    Raises:
        DocRAGError: VALIDATION when chunk_size is not positive
    """
    if chunk_size <= 0:
        raise DocRAGError.validation("chunk_size must be positive", field="chunk_size")
    if not text or not text.strip():
        return []

    effective_overlap = min(max(overlap, 0), chunk_size // 2)
    length = len(text)
    chunks: list[str] = []
    start = 0

    while True:
        end = min(start + chunk_size, length)
        window = text[start:end]
        if window.strip():
            if len(chunks) >= max_chunks:
                logger.warning(
                    "Chunk limit reached, remaining text not indexed",
                    extra={"max_chunks": max_chunks, "offset": start, "text_length": length},
                )
                break
            chunks.append(window)

        if end == length:
            break
        next_start = end - effective_overlap
        if next_start <= start or next_start >= length:
            break
        start = next_start

    return chunks


class TextChunker:
    """Split document text into Chunk models using a sliding window."""

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
        max_chunks: int = DEFAULT_MAX_CHUNKS,
    ) -> None:
        """
        Initialize chunker configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks
            max_chunks: Hard cap on chunks per document

        Raises:
            DocRAGError: VALIDATION when chunk_size is not positive
        """
        if chunk_size <= 0:
            raise DocRAGError.validation("chunk_size must be positive", field="chunk_size")
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self.max_chunks = max_chunks

    def split(self, text: str, document_id: str) -> list[Chunk]:
        """
        Split text into chunks tagged with their document position.

        Args:
            text: Extracted document text
            document_id: Identifier stamped on every chunk

        Returns:
            list[Chunk]: Chunks with chunk_index 0..n-1 and total_chunks n
        """
        pieces = chunk_text(text, self.chunk_size, self.chunk_overlap, self.max_chunks)
        total = len(pieces)
        return [
            Chunk(text=piece, document_id=document_id, chunk_index=i, total_chunks=total)
            for i, piece in enumerate(pieces)
        ]
