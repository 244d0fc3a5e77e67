"""
Durable storage for the FAISS index.

One directory per index holding the LangChain FAISS artifacts
(index.faiss for vectors, index.pkl for documents and id mapping).
Saves write to a scratch directory and move files into place so a
crash mid-save never corrupts the previously committed index.

Dependencies: langchain_community.vectorstores
System role: Persistence of the vector index
"""

import logging
import os
import shutil
import uuid
from pathlib import Path

from langchain_community.vectorstores import FAISS
from langchain_core.embeddings import Embeddings

from docrag.core.exceptions import DocRAGError, ErrorKind

logger = logging.getLogger(__name__)

FAISS_ARTIFACT = "index.faiss"
DOCSTORE_ARTIFACT = "index.pkl"


class FAISSIndexStorage:
    """Load and save a FAISS index under ``<store_path>/<index_name>``."""

    def __init__(self, store_path: str | Path, index_name: str = "documents") -> None:
        """
        Initialize storage location.

        Args:
            store_path: Directory holding all persisted indexes
            index_name: Name of this index's directory
        """
        self._folder = Path(store_path) / index_name

    @property
    def folder(self) -> Path:
        return self._folder

    def exists(self) -> bool:
        """Whether a committed index is present on disk."""
        return (self._folder / FAISS_ARTIFACT).is_file() and (
            self._folder / DOCSTORE_ARTIFACT
        ).is_file()

    def load(self, embeddings: Embeddings) -> FAISS:
        """
        Load the committed index.

        Args:
            embeddings: Embedding provider attached to the loaded store

        Returns:
            FAISS: Loaded vector store

        Raises:
            DocRAGError: PERSISTENCE when the artifacts cannot be read
        """
        try:
            store = FAISS.load_local(
                str(self._folder),
                embeddings,
                allow_dangerous_deserialization=True,
            )
        except Exception as e:
            logger.exception("Failed to load vector index", extra={"folder": str(self._folder)})
            raise DocRAGError(
                ErrorKind.PERSISTENCE,
                f"Failed to load vector index: {e}",
                {"folder": str(self._folder)},
            ) from e

        logger.info(
            "Loaded vector index",
            extra={"folder": str(self._folder), "record_count": store.index.ntotal},
        )
        return store

    def save(self, store: FAISS) -> None:
        """
        Commit the index to disk.

        Args:
            store: Vector store to persist

        Raises:
            DocRAGError: PERSISTENCE when writing fails (committed index untouched)
        """
        scratch = self._folder.parent / f".{self._folder.name}.tmp-{uuid.uuid4().hex}"
        try:
            self._folder.mkdir(parents=True, exist_ok=True)
            store.save_local(str(scratch))
            # Docstore first: an older vector file with a newer docstore
            # still resolves every vector it holds.
            os.replace(scratch / DOCSTORE_ARTIFACT, self._folder / DOCSTORE_ARTIFACT)
            os.replace(scratch / FAISS_ARTIFACT, self._folder / FAISS_ARTIFACT)
        except Exception as e:
            logger.exception("Failed to save vector index", extra={"folder": str(self._folder)})
            raise DocRAGError(
                ErrorKind.PERSISTENCE,
                f"Failed to save vector index: {e}",
                {"folder": str(self._folder)},
            ) from e
        finally:
            shutil.rmtree(scratch, ignore_errors=True)

        logger.info(
            "Saved vector index",
            extra={"folder": str(self._folder), "record_count": store.index.ntotal},
        )
