"""
Chunk domain model for document ingestion.

Represents one window of a document's extracted text together with its
position inside the parent document.

Dependencies: pydantic
System role: Data structure for chunks between chunking and embedding
"""

from pydantic import BaseModel, ConfigDict, Field


class Chunk(BaseModel):
    """Immutable window of source text tagged with its document position."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(min_length=1, description="Chunk text content")
    document_id: str = Field(min_length=1, description="Parent document identifier")
    chunk_index: int = Field(ge=0, description="0-based position in creation order")
    total_chunks: int = Field(ge=1, description="Number of chunks in the parent document")

    def to_metadata(self) -> dict:
        """Metadata stamped on the index record built from this chunk."""
        return {
            "document_id": self.document_id,
            "chunk_index": self.chunk_index,
            "total_chunks": self.total_chunks,
        }
