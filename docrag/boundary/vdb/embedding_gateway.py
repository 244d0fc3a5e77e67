"""
Embedding gateway.

Narrow async interface over a LangChain Embeddings provider: one vector
per text, order preserved, fixed dimension, bounded by a timeout. Provider
failures are classified so quota exhaustion stays distinguishable from
transient and permanent failures.

Dependencies: langchain_core.embeddings, docrag.core.exceptions
System role: Text to vector conversion for ingestion and queries
"""

import asyncio
import logging
from collections.abc import Sequence

from langchain_core.embeddings import Embeddings

from docrag.configs.vector_store import VectorStoreSettings
from docrag.core.exceptions import DocRAGError, ErrorKind, classify_upstream_error

logger = logging.getLogger(__name__)


class EmbeddingGateway:
    """Order-preserving, timeout-bounded access to an embedding model."""

    def __init__(
        self,
        embeddings: Embeddings,
        timeout_seconds: float = 60.0,
        dimension: int | None = None,
        batch_size: int = 100,
    ) -> None:
        """
        Initialize gateway around a LangChain embeddings provider.

        Args:
            embeddings: Provider implementing the LangChain Embeddings interface
            timeout_seconds: Upper bound for a single provider call
            dimension: Expected vector length (checked when set)
            batch_size: Maximum texts per provider call in embed_many
        """
        self._embeddings = embeddings
        self._timeout = timeout_seconds
        self._dimension = dimension
        self._batch_size = batch_size

    @property
    def embeddings(self) -> Embeddings:
        """Underlying provider (handed to FAISS when loading an index)."""
        return self._embeddings

    @property
    def dimension(self) -> int | None:
        return self._dimension

    @property
    def batch_size(self) -> int:
        return self._batch_size

    async def embed(self, text: str) -> list[float]:
        """
        Embed a single query text.

        Args:
            text: Text to embed

        Returns:
            list[float]: Embedding vector

        Raises:
            DocRAGError: VALIDATION for blank text, or the classified provider failure
        """
        if not isinstance(text, str) or not text.strip():
            raise DocRAGError.validation("Cannot embed empty text", field="text")

        try:
            vector = await asyncio.wait_for(
                self._embeddings.aembed_query(text), timeout=self._timeout
            )
        except Exception as e:
            error = classify_upstream_error(e, "embed_query")
            logger.error(
                f"{__name__}:embed - FAILED: {type(e).__name__}: {e}",
                extra={"error_kind": error.kind.value},
            )
            raise error from e

        self._check_dimension(vector)
        return list(vector)

    async def embed_many(self, texts: Sequence[str]) -> list[list[float]]:
        """
        Embed texts in sub-batches, preserving input order.

        Each sub-batch of at most batch_size texts is one provider call with
        its own timeout, so large documents are not bounded by a single
        deadline.

        Args:
            texts: Texts to embed

        Returns:
            list[list[float]]: One vector per input text, same order

        Raises:
            DocRAGError: VALIDATION for blank entries, or the classified provider failure
        """
        if not texts:
            return []
        if any(not isinstance(t, str) or not t.strip() for t in texts):
            raise DocRAGError.validation("Cannot embed empty text", field="texts")

        vectors: list[list[float]] = []
        for start in range(0, len(texts), self._batch_size):
            batch = list(texts[start : start + self._batch_size])
            vectors.extend(await self._embed_batch(batch, start))

        logger.debug(f"{__name__}:embed_many - Embedded {len(vectors)} texts")
        return vectors

    async def _embed_batch(self, batch: list[str], offset: int) -> list[list[float]]:
        try:
            vectors = await asyncio.wait_for(
                self._embeddings.aembed_documents(batch), timeout=self._timeout
            )
        except Exception as e:
            error = classify_upstream_error(e, "embed_documents")
            logger.error(
                f"{__name__}:embed_many - FAILED: {type(e).__name__}: {e}",
                extra={
                    "error_kind": error.kind.value,
                    "batch_offset": offset,
                    "text_count": len(batch),
                },
            )
            raise error from e

        if len(vectors) != len(batch):
            raise DocRAGError(
                ErrorKind.UPSTREAM_REJECTED,
                "Embedding provider returned a different number of vectors than inputs",
                {"expected": len(batch), "received": len(vectors)},
            )
        for vector in vectors:
            self._check_dimension(vector)
        return [list(v) for v in vectors]

    def _check_dimension(self, vector: Sequence[float]) -> None:
        if self._dimension is not None and len(vector) != self._dimension:
            raise DocRAGError(
                ErrorKind.UPSTREAM_REJECTED,
                "Embedding provider returned a vector of unexpected dimension",
                {"expected": self._dimension, "received": len(vector)},
            )


def create_embedding_gateway(settings: VectorStoreSettings) -> EmbeddingGateway:
    """
    Build the production gateway backed by Google Gemini embeddings.

    Args:
        settings: Vector store settings (model, dimension, timeout, batch size)

    Returns:
        EmbeddingGateway: Configured gateway
    """
    from docrag.boundary.vdb.embeddings_wrapper import RetrievalEmbeddings

    embeddings = RetrievalEmbeddings(
        model=settings.embedding_model,
        output_dimensionality=settings.embedding_dimension,
    )
    return EmbeddingGateway(
        embeddings,
        timeout_seconds=settings.embedding_timeout_seconds,
        dimension=settings.embedding_dimension,
        batch_size=settings.embedding_batch_size,
    )
