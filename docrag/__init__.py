"""
docrag: document ingestion and retrieval-augmented question answering.

Upload a document, split it into overlapping chunks, index the chunk
embeddings in a local FAISS store and answer questions from the most
relevant passages.
"""

__version__ = "0.1.0"
