"""
Dependency injection providers.

Resolve the shared handles built in the application lifespan from
``request.app.state``. Tests replace them via ``app.dependency_overrides``.

Dependencies: fastapi, docrag.configs, docrag.application, docrag.boundary
System role: DI container for service injection
"""

from fastapi import Request

from docrag.application.services import DocumentService
from docrag.boundary.vdb import DocumentIndex
from docrag.configs import Settings, get_settings
from docrag.core.rag_query import RAGService


def get_settings_dependency() -> Settings:
    """Application settings."""
    return get_settings()


def get_document_index(request: Request) -> DocumentIndex:
    """Shared document index handle."""
    return request.app.state.document_index


def get_document_service(request: Request) -> DocumentService:
    """Shared document ingestion service."""
    return request.app.state.document_service


def get_rag_service(request: Request) -> RAGService:
    """Shared retrieval orchestrator."""
    return request.app.state.rag_service
