"""
Test suite for RAGService.

Tests question validation, fallback behaviour and context assembly.
Uses mocked index and completion gateway.

System role: Verification of retrieval orchestration
"""

from unittest.mock import AsyncMock

import pytest

from docrag.boundary.vdb import DocumentIndex, IndexRecordMetadata, SearchMatch
from docrag.core.exceptions import DocRAGError, ErrorKind
from docrag.core.rag_query import NO_RELEVANT_INFORMATION, RAGService


def make_match(text: str, document_id: str = "doc-1", chunk_index: int = 0, score: float = 0.5) -> SearchMatch:
    return SearchMatch(
        page_content=text,
        metadata=IndexRecordMetadata(document_id=document_id, chunk_index=chunk_index, total_chunks=2),
        score=score,
    )


@pytest.fixture
def mock_index() -> AsyncMock:
    """Provide mock document index."""
    index = AsyncMock(spec=DocumentIndex)
    index.search.return_value = []
    return index


@pytest.fixture
def rag_service(mock_index: AsyncMock, mock_completion: AsyncMock) -> RAGService:
    return RAGService(index=mock_index, completion=mock_completion, top_k=4)


class TestRAGServiceAnswer:
    """Test suite for RAGService.answer."""

    @pytest.mark.asyncio
    async def test_no_matches_returns_fallback_without_completion(
        self, rag_service: RAGService, mock_completion: AsyncMock
    ) -> None:
        answer = await rag_service.answer("What is this about?")

        assert answer == NO_RELEVANT_INFORMATION
        mock_completion.complete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_joins_passages_in_rank_order(
        self, rag_service: RAGService, mock_index: AsyncMock, mock_completion: AsyncMock
    ) -> None:
        mock_index.search.return_value = [
            make_match("First passage.", chunk_index=1, score=0.1),
            make_match("Second passage.", chunk_index=0, score=0.2),
        ]

        answer = await rag_service.answer("Which passage?")

        assert answer == "Cats sleep a lot."
        prompt = mock_completion.complete.await_args.args[0]
        assert "First passage.\n\nSecond passage." in prompt
        assert "Which passage?" in prompt
        assert prompt.index("First passage.") < prompt.index("Which passage?")

    @pytest.mark.asyncio
    async def test_forwards_trimmed_question_and_filter(
        self, rag_service: RAGService, mock_index: AsyncMock
    ) -> None:
        await rag_service.answer("  Where?  ", document_id="doc-7")

        mock_index.initialize.assert_awaited_once()
        mock_index.search.assert_awaited_once_with("Where?", k=4, document_id="doc-7")

    @pytest.mark.asyncio
    async def test_answer_with_sources_returns_matches(
        self, rag_service: RAGService, mock_index: AsyncMock
    ) -> None:
        matches = [make_match("Cats nap.")]
        mock_index.search.return_value = matches

        result = await rag_service.answer_with_sources("Do cats nap?")

        assert result.sources == matches
        assert result.answer == "Cats sleep a lot."

    @pytest.mark.asyncio
    @pytest.mark.parametrize("question", ["", "   ", "x" * 1001])
    async def test_invalid_question_is_rejected(
        self, rag_service: RAGService, mock_index: AsyncMock, question: str
    ) -> None:
        with pytest.raises(DocRAGError) as exc_info:
            await rag_service.answer(question)

        assert exc_info.value.kind is ErrorKind.VALIDATION
        mock_index.search.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_question_of_max_length_is_accepted(self, rag_service: RAGService) -> None:
        assert await rag_service.answer("x" * 1000) == NO_RELEVANT_INFORMATION

    @pytest.mark.asyncio
    async def test_completion_errors_propagate(
        self, rag_service: RAGService, mock_index: AsyncMock, mock_completion: AsyncMock
    ) -> None:
        mock_index.search.return_value = [make_match("Passage.")]
        mock_completion.complete.side_effect = DocRAGError(ErrorKind.QUOTA_EXCEEDED, "quota")

        with pytest.raises(DocRAGError) as exc_info:
            await rag_service.answer("Anything?")

        assert exc_info.value.kind is ErrorKind.QUOTA_EXCEEDED


class TestRAGServiceWithIndex:
    """RAGService over a real FAISS index with fake embeddings."""

    @pytest.mark.asyncio
    async def test_empty_index_returns_fallback(
        self, document_index: DocumentIndex, mock_completion: AsyncMock
    ) -> None:
        service = RAGService(index=document_index, completion=mock_completion)

        assert await service.answer("Tell me about cats") == NO_RELEVANT_INFORMATION
        mock_completion.complete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_document_returns_fallback(
        self, document_index: DocumentIndex, mock_completion: AsyncMock
    ) -> None:
        await document_index.add_document("The cat sat on the mat.", "doc-cats")
        service = RAGService(index=document_index, completion=mock_completion)

        answer = await service.answer("Tell me about cats", document_id="doc-missing")

        assert answer == NO_RELEVANT_INFORMATION
        mock_completion.complete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_pinned_document_supplies_context(
        self, document_index: DocumentIndex, mock_completion: AsyncMock
    ) -> None:
        await document_index.add_document("The cat sat on the mat.", "doc-cats")
        await document_index.add_document("Tax law changed this year.", "doc-tax")
        service = RAGService(index=document_index, completion=mock_completion)

        await service.answer("What about tax law?", document_id="doc-cats")

        prompt = mock_completion.complete.await_args.args[0]
        assert "The cat sat on the mat." in prompt
        assert "Tax law changed" not in prompt
