"""Retrieval-augmented question answering."""

from docrag.core.rag_query.rag_service import NO_RELEVANT_INFORMATION, RAGAnswer, RAGService

__all__ = ["NO_RELEVANT_INFORMATION", "RAGAnswer", "RAGService"]
