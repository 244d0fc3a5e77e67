"""
Test suite for CompletionGateway.

Tests text extraction, validation and error classification using
LangChain's fake chat model and mocks.

System role: Completion boundary verification
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.language_models import BaseChatModel
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import AIMessage

from docrag.boundary.llm import CompletionGateway
from docrag.core.exceptions import DocRAGError, ErrorKind


class TestCompletionGateway:
    """Test suite for CompletionGateway."""

    @pytest.mark.asyncio
    async def test_returns_model_text(self) -> None:
        gateway = CompletionGateway(FakeListChatModel(responses=["Paris."]))

        assert await gateway.complete("Capital of France?") == "Paris."

    @pytest.mark.asyncio
    async def test_joins_content_blocks(self) -> None:
        model = MagicMock(spec=BaseChatModel)
        model.ainvoke = AsyncMock(
            return_value=AIMessage(content=[{"type": "text", "text": "Hello "}, "world"])
        )
        gateway = CompletionGateway(model)

        assert await gateway.complete("Greet me") == "Hello world"

    @pytest.mark.asyncio
    async def test_blank_prompt_is_rejected(self) -> None:
        gateway = CompletionGateway(FakeListChatModel(responses=["unused"]))

        with pytest.raises(DocRAGError) as exc_info:
            await gateway.complete("  ")

        assert exc_info.value.kind is ErrorKind.VALIDATION

    @pytest.mark.asyncio
    async def test_quota_error_is_classified(self) -> None:
        model = MagicMock(spec=BaseChatModel)
        model.ainvoke = AsyncMock(side_effect=RuntimeError("You exceeded your current quota"))

        with pytest.raises(DocRAGError) as exc_info:
            await CompletionGateway(model).complete("prompt")

        assert exc_info.value.kind is ErrorKind.QUOTA_EXCEEDED

    @pytest.mark.asyncio
    async def test_timeout_is_unavailable(self) -> None:
        async def never_answers(prompt: str) -> AIMessage:
            await asyncio.sleep(10)
            return AIMessage(content="late")

        model = MagicMock(spec=BaseChatModel)
        model.ainvoke = never_answers

        with pytest.raises(DocRAGError) as exc_info:
            await CompletionGateway(model, timeout_seconds=0.05).complete("prompt")

        assert exc_info.value.kind is ErrorKind.UPSTREAM_UNAVAILABLE
