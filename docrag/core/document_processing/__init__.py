"""
Document processing for ingestion.

Exports: TextChunker, chunk_text, ParsingTask, Chunk, IngestionResult
"""

from .models import Chunk, IngestionResult
from .tasks import ParsingTask, TextChunker, chunk_text

__all__ = [
    "Chunk",
    "IngestionResult",
    "ParsingTask",
    "TextChunker",
    "chunk_text",
]
