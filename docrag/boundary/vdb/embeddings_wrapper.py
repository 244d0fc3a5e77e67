"""
Gemini embeddings tuned for retrieval.

Pins every vector to one output dimension (the base class ignores
output_dimensionality in the constructor) and embeds chunks and questions
with Gemini's matching retrieval task types.

Dependencies: langchain_google_genai
System role: Production embedding provider for the document index
"""

import logging

from langchain_google_genai import GoogleGenerativeAIEmbeddings

logger = logging.getLogger(__name__)

DOCUMENT_TASK_TYPE = "RETRIEVAL_DOCUMENT"
QUERY_TASK_TYPE = "RETRIEVAL_QUERY"


class RetrievalEmbeddings(GoogleGenerativeAIEmbeddings):
    """GoogleGenerativeAIEmbeddings with a fixed dimension and retrieval task types."""

    _output_dimensionality: int = 1536

    def __init__(
        self,
        model: str = "models/gemini-embedding-001",
        output_dimensionality: int = 1536,
        **kwargs,
    ) -> None:
        """
        Initialize embeddings.

        Args:
            model: Google embedding model ID
            output_dimensionality: Dimension of every returned vector
            **kwargs: Additional arguments for GoogleGenerativeAIEmbeddings
        """
        super().__init__(model=model, **kwargs)
        self._output_dimensionality = output_dimensionality
        logger.info(
            f"{__name__}:__init__ - model={model}, output_dimensionality={output_dimensionality}"
        )

    def _dimension(self, override: int | None) -> int:
        return override or self._output_dimensionality

    def embed_documents(
        self,
        texts: list[str],
        *,
        task_type: str | None = None,
        output_dimensionality: int | None = None,
        **kwargs,
    ) -> list[list[float]]:
        return super().embed_documents(
            texts,
            task_type=task_type or DOCUMENT_TASK_TYPE,
            output_dimensionality=self._dimension(output_dimensionality),
            **kwargs,
        )

    def embed_query(
        self,
        text: str,
        task_type: str | None = None,
        output_dimensionality: int | None = None,
        **kwargs,
    ) -> list[float]:
        return super().embed_query(
            text,
            task_type=task_type or QUERY_TASK_TYPE,
            output_dimensionality=self._dimension(output_dimensionality),
            **kwargs,
        )

    async def aembed_documents(
        self,
        texts: list[str],
        *,
        task_type: str | None = None,
        output_dimensionality: int | None = None,
        **kwargs,
    ) -> list[list[float]]:
        return await super().aembed_documents(
            texts,
            task_type=task_type or DOCUMENT_TASK_TYPE,
            output_dimensionality=self._dimension(output_dimensionality),
            **kwargs,
        )

    async def aembed_query(
        self,
        text: str,
        task_type: str | None = None,
        output_dimensionality: int | None = None,
        **kwargs,
    ) -> list[float]:
        return await super().aembed_query(
            text,
            task_type=task_type or QUERY_TASK_TYPE,
            output_dimensionality=self._dimension(output_dimensionality),
            **kwargs,
        )
