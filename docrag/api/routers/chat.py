"""Chat API endpoints.

Routes:
- POST /api/chat - Answer a question from the uploaded documents

Dependencies: docrag.core.rag_query
System role: Question answering HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from docrag.api.deps import get_rag_service
from docrag.core.rag_query import RAGService
from docrag.models.chat import ChatRequest, ChatResponse, ChatSource

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    rag_service: RAGService = Depends(get_rag_service),
) -> ChatResponse:
    """Answer a question, optionally pinned to one document.

    Flow:
    1. Retrieve the closest passages (filtered by documentId if given)
    2. Answer from those passages, or return the fallback answer
    3. Map retrieved passages to sources

    Args:
        request: ChatRequest with question and optional documentId
        rag_service: Injected RAGService

    Returns:
        ChatResponse: Question, answer and sources
    """
    result = await rag_service.answer_with_sources(
        request.question,
        document_id=request.document_id or None,
    )
    sources = [
        ChatSource(
            document_id=match.metadata.document_id,
            chunk_index=match.metadata.chunk_index,
            score=match.score,
        )
        for match in result.sources
    ]
    return ChatResponse(question=request.question, answer=result.answer, sources=sources)
