"""
API test fixtures.

Provides: FastAPI app with overridden dependencies and a TestClient.
Dependencies: pytest, fastapi
System role: HTTP layer test infrastructure
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from docrag.api.deps import get_document_index, get_document_service, get_rag_service
from docrag.application.services import DocumentService
from docrag.boundary.vdb import DocumentIndex
from docrag.core.rag_query import RAGService
from docrag.main import create_app


@pytest.fixture
def mock_rag_service() -> AsyncMock:
    """Provide mock RAGService."""
    return AsyncMock(spec=RAGService)


@pytest.fixture
def mock_document_service() -> MagicMock:
    """Provide mock DocumentService."""
    service = MagicMock(spec=DocumentService)
    service.ingest_pdf = AsyncMock()
    return service


@pytest.fixture
def app(
    document_index: DocumentIndex,
    mock_rag_service: AsyncMock,
    mock_document_service: MagicMock,
) -> FastAPI:
    """Provide app whose handles are test doubles (lifespan not run)."""
    app = create_app()
    app.dependency_overrides[get_document_index] = lambda: document_index
    app.dependency_overrides[get_rag_service] = lambda: mock_rag_service
    app.dependency_overrides[get_document_service] = lambda: mock_document_service
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
