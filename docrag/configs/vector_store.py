"""
Vector store configuration settings.

Manages the local FAISS index location, chunking policy and the
embedding model used to vectorize chunks and queries.

Dependencies: pydantic, pydantic_settings
System role: Vector index configuration for RAG retrieval
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorStoreSettings(BaseSettings):
    """Local FAISS vector store configuration."""

    model_config = SettingsConfigDict(
        env_prefix="VECTOR_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    store_path: str = Field(
        default="./vector_store",
        description="Directory holding the persisted index",
    )
    index_name: str = Field(default="documents", description="Name of the index artifact")

    chunk_size: int = Field(default=2000, gt=0, description="Chunk window size in characters")
    chunk_overlap: int = Field(default=200, ge=0, description="Overlap between consecutive chunks")
    max_chunks: int = Field(
        default=50_000,
        gt=0,
        description="Hard cap on chunks produced for a single document",
    )
    top_k: int = Field(default=4, ge=1, le=100, description="Passages retrieved per question")

    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Google embedding model ID",
    )
    embedding_dimension: int = Field(
        default=1536,
        description="Fixed embedding vector dimension for every record in the index",
    )
    embedding_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Upper bound for a single embedding request",
    )
    embedding_batch_size: int = Field(
        default=100,
        gt=0,
        description="Maximum chunks sent to the embedding provider per request",
    )

    @model_validator(mode="after")
    def _check_overlap(self) -> "VectorStoreSettings":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError("chunk_overlap must be smaller than chunk_size")
        return self
