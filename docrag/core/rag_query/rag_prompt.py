"""
RAG answer prompt.

Instructs the model to answer strictly from the retrieved context and to
say so when the context is insufficient.

Dependencies: langchain_core.prompts
System role: Prompt template for grounded answers
"""

from langchain_core.prompts import PromptTemplate

CONTEXT_SEPARATOR = "\n\n"

RAG_TEMPLATE = """You are a helpful assistant that answers questions using only the context below, taken from uploaded documents.

Context:
{context}

Question: {question}

Answer strictly from the context provided. If the context does not contain enough information to answer the question, say so explicitly instead of guessing.
"""

RAG_PROMPT = PromptTemplate.from_template(RAG_TEMPLATE)


def build_rag_prompt(context: str, question: str) -> str:
    """Render the answer prompt for a context block and question."""
    return RAG_PROMPT.format(context=context, question=question)
