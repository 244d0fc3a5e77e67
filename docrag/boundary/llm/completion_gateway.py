"""
Completion gateway.

Narrow async ``complete(prompt) -> text`` interface over a LangChain chat
model, bounded by a timeout, with provider failures classified the same
way as embedding failures.

Dependencies: langchain_core.language_models, langchain_google_genai
System role: Answer generation for the retrieval orchestrator
"""

import asyncio
import logging

from langchain_core.language_models import BaseChatModel

from docrag.configs.llm import LLMSettings
from docrag.core.exceptions import DocRAGError, classify_upstream_error

logger = logging.getLogger(__name__)


class CompletionGateway:
    """Timeout-bounded text completion over a chat model."""

    def __init__(self, model: BaseChatModel, timeout_seconds: float = 60.0) -> None:
        """
        Initialize gateway around a chat model.

        Args:
            model: LangChain chat model
            timeout_seconds: Upper bound for a single completion
        """
        self._model = model
        self._timeout = timeout_seconds

    async def complete(self, prompt: str) -> str:
        """
        Generate text for a fully rendered prompt.

        Args:
            prompt: Prompt text

        Returns:
            str: Generated text (content blocks joined)

        Raises:
            DocRAGError: VALIDATION for blank prompt, or the classified provider failure
        """
        if not prompt or not prompt.strip():
            raise DocRAGError.validation("Prompt is required", field="prompt")

        try:
            message = await asyncio.wait_for(self._model.ainvoke(prompt), timeout=self._timeout)
        except Exception as e:
            error = classify_upstream_error(e, "complete")
            logger.error(
                f"{__name__}:complete - FAILED: {type(e).__name__}: {e}",
                extra={"error_kind": error.kind.value},
            )
            raise error from e

        return _content_text(message.content)


def _content_text(content: str | list) -> str:
    # Gemini may return a list of content blocks instead of a string
    if isinstance(content, list):
        return "".join(
            item if isinstance(item, str) else (item.get("text", "") if isinstance(item, dict) else str(item))
            for item in content
        )
    return str(content)


def create_completion_gateway(settings: LLMSettings) -> CompletionGateway:
    """
    Build the production gateway backed by a Google Gemini chat model.

    Args:
        settings: LLM settings (model, temperature, limits, timeout)

    Returns:
        CompletionGateway: Configured gateway
    """
    from langchain_google_genai import ChatGoogleGenerativeAI

    model = ChatGoogleGenerativeAI(
        model=settings.model_id,
        temperature=settings.temperature,
        max_output_tokens=settings.max_output_tokens,
    )
    return CompletionGateway(model, timeout_seconds=settings.timeout_seconds)
