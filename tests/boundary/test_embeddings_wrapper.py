"""
Test suite for RetrievalEmbeddings.

The Gemini base-class calls are patched so only the forwarded task type
and output dimension are checked; no network is used.
"""

from unittest.mock import AsyncMock, patch

import pytest
from langchain_google_genai import GoogleGenerativeAIEmbeddings

from docrag.boundary.vdb.embeddings_wrapper import (
    DOCUMENT_TASK_TYPE,
    QUERY_TASK_TYPE,
    RetrievalEmbeddings,
)


@pytest.fixture
def embeddings(monkeypatch: pytest.MonkeyPatch) -> RetrievalEmbeddings:
    """Provide embeddings on the Gemini Developer API backend with a dummy key."""
    monkeypatch.delenv("GOOGLE_GENAI_USE_VERTEXAI", raising=False)
    return RetrievalEmbeddings(google_api_key="x")


class TestRetrievalEmbeddingsSync:
    """Sync calls forward retrieval task types and the pinned dimension."""

    def test_query_uses_query_task_type(self, embeddings: RetrievalEmbeddings) -> None:
        with patch.object(GoogleGenerativeAIEmbeddings, "embed_query", return_value=[0.0]) as base:
            assert embeddings.embed_query("Do cats sleep?") == [0.0]

        base.assert_called_once_with(
            "Do cats sleep?",
            task_type=QUERY_TASK_TYPE,
            output_dimensionality=1536,
        )

    def test_documents_use_document_task_type(self, embeddings: RetrievalEmbeddings) -> None:
        with patch.object(
            GoogleGenerativeAIEmbeddings, "embed_documents", return_value=[[0.0], [0.0]]
        ) as base:
            embeddings.embed_documents(["cats", "dogs"])

        base.assert_called_once_with(
            ["cats", "dogs"],
            task_type=DOCUMENT_TASK_TYPE,
            output_dimensionality=1536,
        )

    def test_explicit_arguments_win(self, embeddings: RetrievalEmbeddings) -> None:
        with patch.object(GoogleGenerativeAIEmbeddings, "embed_query", return_value=[0.0]) as base:
            embeddings.embed_query("cats", task_type="CLASSIFICATION", output_dimensionality=768)

        base.assert_called_once_with("cats", task_type="CLASSIFICATION", output_dimensionality=768)

    def test_constructor_dimension_is_pinned(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("GOOGLE_GENAI_USE_VERTEXAI", raising=False)
        embeddings = RetrievalEmbeddings(output_dimensionality=768, google_api_key="x")

        with patch.object(GoogleGenerativeAIEmbeddings, "embed_documents", return_value=[[0.0]]) as base:
            embeddings.embed_documents(["cats"])

        assert base.call_args.kwargs["output_dimensionality"] == 768


class TestRetrievalEmbeddingsAsync:
    """Async calls forward the same arguments as the sync ones."""

    @pytest.mark.asyncio
    async def test_aembed_query_uses_query_task_type(self, embeddings: RetrievalEmbeddings) -> None:
        with patch.object(
            GoogleGenerativeAIEmbeddings, "aembed_query", new_callable=AsyncMock, return_value=[0.0]
        ) as base:
            await embeddings.aembed_query("Do cats sleep?")

        base.assert_awaited_once_with(
            "Do cats sleep?",
            task_type=QUERY_TASK_TYPE,
            output_dimensionality=1536,
        )

    @pytest.mark.asyncio
    async def test_aembed_documents_uses_document_task_type(self, embeddings: RetrievalEmbeddings) -> None:
        with patch.object(
            GoogleGenerativeAIEmbeddings,
            "aembed_documents",
            new_callable=AsyncMock,
            return_value=[[0.0]],
        ) as base:
            await embeddings.aembed_documents(["cats"], output_dimensionality=256)

        base.assert_awaited_once_with(
            ["cats"],
            task_type=DOCUMENT_TASK_TYPE,
            output_dimensionality=256,
        )
