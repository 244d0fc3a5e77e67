"""
Retrieval orchestrator.

Turns a question into a grounded answer: search the document index
(optionally pinned to one document), join the retrieved passages into a
context block, and ask the completion model to answer from it. When
nothing relevant is retrieved the model is not called.

Dependencies: docrag.boundary.vdb, docrag.boundary.llm, langchain_core.prompts
System role: RAG query orchestration
"""

import logging

from pydantic import BaseModel, Field

from docrag.boundary.llm.completion_gateway import CompletionGateway
from docrag.boundary.vdb.faiss_index import DocumentIndex
from docrag.boundary.vdb.vector_schemas import SearchMatch
from docrag.core.exceptions import DocRAGError
from docrag.core.rag_query.rag_prompt import CONTEXT_SEPARATOR, build_rag_prompt

logger = logging.getLogger(__name__)

NO_RELEVANT_INFORMATION = (
    "I couldn't find any relevant information in the uploaded documents "
    "to answer your question."
)
MAX_QUESTION_LENGTH = 1000


class RAGAnswer(BaseModel):
    """Answer together with the passages it was generated from."""

    answer: str = Field(description="Generated answer or the fixed fallback")
    sources: list[SearchMatch] = Field(default_factory=list, description="Retrieved passages, best-first")


class RAGService:
    """Answer questions from indexed document passages."""

    def __init__(
        self,
        index: DocumentIndex,
        completion: CompletionGateway,
        top_k: int = 4,
    ) -> None:
        """
        Initialize orchestrator.

        Args:
            index: Shared document index handle
            completion: Gateway to the completion model
            top_k: Passages retrieved per question
        """
        self._index = index
        self._completion = completion
        self._top_k = top_k

    async def answer(self, question: str, document_id: str | None = None) -> str:
        """
        Answer a question from the indexed documents.

        Args:
            question: Natural-language question (1-1000 characters)
            document_id: Restrict retrieval to one document

        Returns:
            str: Answer text, trimmed

        Raises:
            DocRAGError: VALIDATION for bad questions, provider or persistence errors
        """
        result = await self.answer_with_sources(question, document_id)
        return result.answer

    async def answer_with_sources(
        self,
        question: str,
        document_id: str | None = None,
    ) -> RAGAnswer:
        """
        Answer a question and return the retrieved passages.

        Args:
            question: Natural-language question (1-1000 characters)
            document_id: Restrict retrieval to one document

        Returns:
            RAGAnswer: Answer and sources (no sources for the fallback answer)
        """
        question = _validate_question(question)

        await self._index.initialize()
        matches = await self._index.search(question, k=self._top_k, document_id=document_id)

        if not matches:
            logger.info(
                "No relevant passages, returning fallback answer",
                extra={"document_id": document_id},
            )
            return RAGAnswer(answer=NO_RELEVANT_INFORMATION)

        context = CONTEXT_SEPARATOR.join(match.page_content for match in matches)
        prompt = build_rag_prompt(context=context, question=question)
        answer = (await self._completion.complete(prompt)).strip()

        logger.info(
            "Answered question",
            extra={
                "document_id": document_id,
                "passage_count": len(matches),
                "context_len": len(context),
                "answer_len": len(answer),
            },
        )
        return RAGAnswer(answer=answer, sources=matches)


def _validate_question(question: str) -> str:
    if not isinstance(question, str) or not question.strip():
        raise DocRAGError.validation("Question is required", field="question")
    question = question.strip()
    if len(question) > MAX_QUESTION_LENGTH:
        raise DocRAGError.validation(
            f"Question must be between 1 and {MAX_QUESTION_LENGTH} characters",
            field="question",
        )
    return question
