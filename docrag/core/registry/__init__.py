"""Registry of ingested documents."""

from docrag.core.registry.document_registry import DocumentEntry, DocumentRegistry

__all__ = ["DocumentEntry", "DocumentRegistry"]
