"""
Vector index schemas.

Pydantic models for index record metadata and search matches.

Dependencies: pydantic, langchain_core.documents
System role: Type definitions for vector operations
"""

from langchain_core.documents import Document
from pydantic import BaseModel, Field


class IndexRecordMetadata(BaseModel):
    """Metadata stamped on every index record."""

    document_id: str = Field(description="Document the chunk belongs to (filter key)")
    chunk_index: int = Field(ge=0, description="Position of the chunk in its document")
    total_chunks: int = Field(ge=1, description="Number of chunks in the document")


class SearchMatch(BaseModel):
    """Single result from a similarity search, best-first."""

    page_content: str = Field(description="Chunk text retained for answer context")
    metadata: IndexRecordMetadata = Field(description="Chunk metadata")
    score: float = Field(description="Distance to the query vector (lower is closer)")

    @classmethod
    def from_scored_document(cls, document: Document, score: float) -> "SearchMatch":
        return cls(
            page_content=document.page_content,
            metadata=IndexRecordMetadata.model_validate(document.metadata),
            score=float(score),
        )
