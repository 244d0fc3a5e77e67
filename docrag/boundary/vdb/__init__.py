"""
Vector database boundary layer.

Provides the FAISS document index, its durable storage and the
embedding gateway used for chunk and query vectors.

Dependencies: langchain_community, faiss-cpu
System role: Vector store adapter for RAG retrieval
"""

from docrag.boundary.vdb.embedding_gateway import EmbeddingGateway, create_embedding_gateway
from docrag.boundary.vdb.faiss_index import DocumentIndex, IndexState
from docrag.boundary.vdb.index_storage import FAISSIndexStorage
from docrag.boundary.vdb.vector_schemas import IndexRecordMetadata, SearchMatch

__all__ = [
    "DocumentIndex",
    "EmbeddingGateway",
    "FAISSIndexStorage",
    "IndexRecordMetadata",
    "IndexState",
    "SearchMatch",
    "create_embedding_gateway",
]
