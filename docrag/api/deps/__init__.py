"""API-specific dependencies."""

from .dependencies import (
    get_document_index,
    get_document_service,
    get_rag_service,
    get_settings_dependency,
)

__all__ = [
    "get_document_index",
    "get_document_service",
    "get_rag_service",
    "get_settings_dependency",
]
