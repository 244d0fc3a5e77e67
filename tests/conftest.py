"""
Shared test fixtures and configuration for entire test suite.

Provides: deterministic fake embeddings, a real FAISS index in tmp_path,
completion mocks and a FastAPI app wired with test handles.
Dependencies: pytest, langchain_core, fastapi
System role: Test infrastructure and fixture management
"""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from langchain_core.embeddings import Embeddings

from docrag.boundary.llm import CompletionGateway
from docrag.boundary.vdb import DocumentIndex, EmbeddingGateway, FAISSIndexStorage
from docrag.core.document_processing import TextChunker
from docrag.core.registry import DocumentRegistry

KEYWORDS = ("cat", "dog", "fish", "tax", "law", "space", "ocean", "bread")


class KeywordEmbeddings(Embeddings):
    """Deterministic embeddings: one axis per keyword plus a bias axis."""

    def __init__(self) -> None:
        self.document_calls: list[list[str]] = []
        self.query_calls: list[str] = []

    @staticmethod
    def vectorize(text: str) -> list[float]:
        words = text.lower().split()
        return [float(sum(word.strip(".,?!") == kw for word in words)) for kw in KEYWORDS] + [1.0]

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        self.document_calls.append(list(texts))
        return [self.vectorize(t) for t in texts]

    def embed_query(self, text: str) -> list[float]:
        self.query_calls.append(text)
        return self.vectorize(text)


EMBEDDING_DIMENSION = len(KEYWORDS) + 1


@pytest.fixture
def fake_embeddings() -> KeywordEmbeddings:
    """Provide deterministic keyword embeddings."""
    return KeywordEmbeddings()


@pytest.fixture
def embedding_gateway(fake_embeddings: KeywordEmbeddings) -> EmbeddingGateway:
    """Provide gateway over the fake embeddings."""
    return EmbeddingGateway(fake_embeddings, timeout_seconds=5, dimension=EMBEDDING_DIMENSION)


@pytest.fixture
def index_storage(tmp_path: Path) -> FAISSIndexStorage:
    """Provide index storage rooted in a temp directory."""
    return FAISSIndexStorage(store_path=tmp_path / "vector_store", index_name="documents")


@pytest.fixture
def document_index(
    index_storage: FAISSIndexStorage, embedding_gateway: EmbeddingGateway
) -> DocumentIndex:
    """Provide a fresh, absent document index."""
    return DocumentIndex(storage=index_storage, embedding_gateway=embedding_gateway)


@pytest.fixture
def small_chunk_index(
    index_storage: FAISSIndexStorage, embedding_gateway: EmbeddingGateway
) -> DocumentIndex:
    """Provide an index that splits text into 40-character windows."""
    return DocumentIndex(
        storage=index_storage,
        embedding_gateway=embedding_gateway,
        chunker=TextChunker(chunk_size=40, chunk_overlap=0),
    )


@pytest.fixture
def mock_completion() -> AsyncMock:
    """Provide mock completion gateway answering with a fixed text."""
    completion = AsyncMock(spec=CompletionGateway)
    completion.complete.return_value = "  Cats sleep a lot.  "
    return completion


@pytest.fixture
def registry(tmp_path: Path) -> DocumentRegistry:
    """Provide registry persisted to a temp JSON file."""
    return DocumentRegistry(persist_path=tmp_path / "registry.json")
