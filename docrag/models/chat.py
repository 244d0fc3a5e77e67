"""
Chat domain models and schemas.

Request/response schemas for question answering.

Dependencies: pydantic
System role: Chat API contracts
"""

from pydantic import BaseModel, ConfigDict, Field

from docrag.core.rag_query.rag_service import MAX_QUESTION_LENGTH


class ChatRequest(BaseModel):
    """Request schema for a question."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    question: str = Field(min_length=1, max_length=MAX_QUESTION_LENGTH, description="User question")
    document_id: str | None = Field(
        default=None,
        alias="documentId",
        description="Restrict retrieval to one uploaded document",
    )


class ChatSource(BaseModel):
    """Retrieved passage used as answer context."""

    model_config = ConfigDict(populate_by_name=True)

    document_id: str = Field(alias="documentId")
    chunk_index: int = Field(alias="chunkIndex")
    score: float = Field(description="Distance to the question (lower is closer)")


class ChatResponse(BaseModel):
    """Response schema for a question."""

    success: bool = True
    question: str
    answer: str
    sources: list[ChatSource] = Field(default_factory=list)
