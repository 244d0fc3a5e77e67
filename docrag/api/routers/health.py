"""
Health check API endpoints.

Routes: GET /health, GET /health/vector-store

Dependencies: docrag.boundary.vdb
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from docrag.api.deps import get_document_index
from docrag.boundary.vdb import DocumentIndex


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


class VectorStoreHealthResponse(HealthResponse):
    """Vector store health with index lifecycle details."""

    index_state: str
    record_count: int


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/vector-store", response_model=VectorStoreHealthResponse)
async def health_check_vector_store(
    index: DocumentIndex = Depends(get_document_index),
) -> VectorStoreHealthResponse:
    """Vector store health check."""
    return VectorStoreHealthResponse(
        status="healthy",
        message="Vector store accessible",
        index_state=index.state.value,
        record_count=index.record_count,
    )
