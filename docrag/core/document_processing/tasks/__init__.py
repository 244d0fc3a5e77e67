"""Document processing tasks: text extraction and chunking."""

from .chunking_task import DEFAULT_MAX_CHUNKS, TextChunker, chunk_text
from .parsing_task import ParsingTask

__all__ = [
    "DEFAULT_MAX_CHUNKS",
    "ParsingTask",
    "TextChunker",
    "chunk_text",
]
