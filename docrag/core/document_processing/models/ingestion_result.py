"""
Ingestion result model.

Represents the outcome of indexing one document.

Dependencies: pydantic
System role: Return type for DocumentService.ingest_text()
"""

from pydantic import BaseModel, Field


class IngestionResult(BaseModel):
    """Result of ingesting a single document."""

    document_id: str = Field(description="Identifier stamped on every indexed chunk")
    filename: str = Field(description="Original or stored filename")
    chunk_count: int = Field(description="Number of chunks indexed")
    processing_time_ms: float = Field(description="Total processing time in milliseconds")
