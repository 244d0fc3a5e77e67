"""Application service orchestrators."""

from docrag.application.services.document_service import DocumentService, make_document_id

__all__ = ["DocumentService", "make_document_id"]
