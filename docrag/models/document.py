"""
Document domain models and schemas.

Response schemas for upload and listing operations.

Dependencies: pydantic
System role: Document API contracts
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UploadedDocument(BaseModel):
    """Payload returned after a successful upload."""

    model_config = ConfigDict(populate_by_name=True)

    document_id: str = Field(alias="documentId", description="ID to pin questions to")
    filename: str = Field(description="Original upload filename")
    chunk_count: int = Field(alias="chunkCount", description="Chunks indexed")


class DocumentSummary(BaseModel):
    """Registry entry as exposed by the listing endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    document_id: str = Field(alias="documentId")
    filename: str
    chunk_count: int = Field(alias="chunkCount")
    created_at: datetime = Field(alias="createdAt")


class DocumentListResponse(BaseModel):
    """Response schema for document listing."""

    documents: list[DocumentSummary]
    total: int = Field(description="Total number of documents")
