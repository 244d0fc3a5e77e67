"""
FAISS document index.

Holds the growable collection of (vector, page content, metadata)
records, answers nearest-neighbour queries with optional per-document
filtering, and persists every mutation before exposing it.

Writes are serialized by a single asyncio lock around
load-mutate-persist. Each write builds a clone of the live store, saves
the clone, then swaps it in, so searches never see records that were not
committed and a failed save leaves the live index unchanged.

Dependencies: faiss-cpu, langchain_community.vectorstores,
    docrag.boundary.vdb.embedding_gateway, docrag.boundary.vdb.index_storage
System role: Vector index for RAG ingestion and retrieval
"""

import asyncio
import logging
from enum import Enum

import faiss
from langchain_community.docstore.in_memory import InMemoryDocstore
from langchain_community.vectorstores import FAISS

from docrag.boundary.vdb.embedding_gateway import EmbeddingGateway
from docrag.boundary.vdb.index_storage import FAISSIndexStorage
from docrag.boundary.vdb.vector_schemas import SearchMatch
from docrag.core.document_processing.models import Chunk
from docrag.core.document_processing.tasks import TextChunker
from docrag.core.exceptions import DocRAGError, ErrorKind

logger = logging.getLogger(__name__)


class IndexState(str, Enum):
    """Lifecycle of the index handle."""

    ABSENT = "absent"  # nothing on disk, nothing in memory
    PERSISTED = "persisted"  # committed on disk, not loaded yet
    LOADED = "loaded"  # in memory (and committed on disk)


class DocumentIndex:
    """
    Process-wide vector index handle.

    Construct once at startup and share by reference between ingestion
    and retrieval. Creation of the backing index is deferred to the first
    add_document call; there is no empty-but-initialized index on disk.
    """

    def __init__(
        self,
        storage: FAISSIndexStorage,
        embedding_gateway: EmbeddingGateway,
        chunker: TextChunker | None = None,
    ) -> None:
        """
        Initialize index handle.

        Args:
            storage: Durable storage location
            embedding_gateway: Gateway used for chunk and query vectors
            chunker: Chunker for ingested text (2000/200 windows if None)
        """
        self._storage = storage
        self._gateway = embedding_gateway
        self._chunker = chunker or TextChunker()
        self._store: FAISS | None = None
        self._write_lock = asyncio.Lock()

    @property
    def state(self) -> IndexState:
        if self._store is not None:
            return IndexState.LOADED
        if self._storage.exists():
            return IndexState.PERSISTED
        return IndexState.ABSENT

    @property
    def record_count(self) -> int:
        """Number of records in the loaded index (0 unless LOADED)."""
        return self._store.index.ntotal if self._store is not None else 0

    def document_record_count(self, document_id: str) -> int:
        """Number of loaded records tagged with document_id."""
        if self._store is None:
            return 0
        return sum(
            1
            for doc in self._store.docstore._dict.values()
            if doc.metadata.get("document_id") == document_id
        )

    async def initialize(self) -> None:
        """
        Load the committed index if one exists.

        Idempotent: a loaded index is left as is, and an absent index stays
        absent until the first document is added.

        Raises:
            DocRAGError: PERSISTENCE when the committed index cannot be read
        """
        if self._store is not None:
            return
        async with self._write_lock:
            await self._load_if_persisted()

    async def add_document(self, text: str, document_id: str) -> str:
        """
        Chunk, embed and append a document, then persist the index.

        Args:
            text: Extracted plain text of the document
            document_id: Identifier stamped on every chunk

        Returns:
            str: The document_id, unchanged

        Raises:
            DocRAGError: VALIDATION for bad input, NO_CONTENT when the text
                yields no chunks, provider errors from embedding, PERSISTENCE
                when load or save fails (live index unchanged)
        """
        if not isinstance(document_id, str) or not document_id.strip():
            raise DocRAGError.validation("Document ID is required", field="document_id")
        if not isinstance(text, str):
            raise DocRAGError.validation("Document text must be a string", field="text")

        chunks = self._chunker.split(text, document_id)
        if not chunks:
            raise DocRAGError.no_content(document_id)

        vectors = await self._gateway.embed_many([chunk.text for chunk in chunks])

        async with self._write_lock:
            await self._load_if_persisted()
            candidate = await asyncio.to_thread(self._build_candidate, chunks, vectors)
            await asyncio.to_thread(self._storage.save, candidate)
            self._store = candidate

        logger.info(
            "Indexed document",
            extra={
                "document_id": document_id,
                "chunk_count": len(chunks),
                "record_count": candidate.index.ntotal,
            },
        )
        return document_id

    async def search(
        self,
        query_text: str,
        k: int = 4,
        document_id: str | None = None,
    ) -> list[SearchMatch]:
        """
        Return the records closest to the query, best-first.

        With a non-empty document_id filter, 2*k candidates are fetched and only
        those tagged with the document are kept (at most k). Matching
        records ranked below the 2*k global candidates are not returned.

        Args:
            query_text: Question or search text
            k: Maximum number of matches
            document_id: Restrict matches to one document (empty or None searches all)

        Returns:
            list[SearchMatch]: Matches ordered by increasing distance
                (empty when no document was ever ingested)

        Raises:
            DocRAGError: VALIDATION for blank query or k < 1, provider errors
                from embedding, PERSISTENCE when the index cannot be loaded
        """
        if not isinstance(query_text, str) or not query_text.strip():
            raise DocRAGError.validation("Query text is required", field="query_text")
        if k < 1:
            raise DocRAGError.validation("k must be at least 1", field="k")

        if self._store is None:
            await self.initialize()
        store = self._store
        if store is None:
            logger.info("Search on empty index", extra={"document_id": document_id})
            return []

        query_vector = await self._gateway.embed(query_text)
        fetch_k = k * 2 if document_id else k

        try:
            scored = await asyncio.to_thread(
                store.similarity_search_with_score_by_vector, query_vector, fetch_k
            )
        except Exception as e:
            logger.exception("Similarity search failed", extra={"fetch_k": fetch_k})
            raise DocRAGError(
                ErrorKind.INTERNAL,
                f"Similarity search failed: {e}",
                {"operation": "search"},
            ) from e

        if document_id:
            scored = [
                (doc, score)
                for doc, score in scored
                if doc.metadata.get("document_id") == document_id
            ]

        matches = [SearchMatch.from_scored_document(doc, score) for doc, score in scored[:k]]
        logger.info(
            "Search complete",
            extra={
                "k": k,
                "fetch_k": fetch_k,
                "document_id": document_id,
                "match_count": len(matches),
            },
        )
        return matches

    async def _load_if_persisted(self) -> None:
        """Load the committed index into memory. Caller holds the write lock."""
        if self._store is not None or not self._storage.exists():
            return
        self._store = await asyncio.to_thread(self._storage.load, self._gateway.embeddings)

    def _build_candidate(self, chunks: list[Chunk], vectors: list[list[float]]) -> FAISS:
        """Return a new store holding the live records plus the new ones."""
        text_embeddings = [(chunk.text, vector) for chunk, vector in zip(chunks, vectors)]
        metadatas = [chunk.to_metadata() for chunk in chunks]

        if self._store is None:
            return FAISS.from_embeddings(
                text_embeddings,
                self._gateway.embeddings,
                metadatas=metadatas,
            )

        if len(vectors[0]) != self._store.index.d:
            raise DocRAGError(
                ErrorKind.INTERNAL,
                "Embedding dimension does not match the existing index",
                {"expected": self._store.index.d, "received": len(vectors[0])},
            )
        candidate = _clone_store(self._store)
        candidate.add_embeddings(text_embeddings, metadatas=metadatas)
        return candidate


def _clone_store(store: FAISS) -> FAISS:
    """Deep copy of a FAISS store (vectors, docstore and id mapping)."""
    return FAISS(
        embedding_function=store.embedding_function,
        index=faiss.clone_index(store.index),
        docstore=InMemoryDocstore(dict(store.docstore._dict)),
        index_to_docstore_id=dict(store.index_to_docstore_id),
        normalize_L2=store._normalize_L2,
        distance_strategy=store.distance_strategy,
    )
