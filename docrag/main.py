"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, docrag.api, docrag.observability, docrag.configs
System role: Application initialization and configuration
"""

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docrag.api import api_router
from docrag.api.errors import register_exception_handlers
from docrag.api.routers import health_router
from docrag.application.services import DocumentService
from docrag.boundary.llm import create_completion_gateway
from docrag.boundary.vdb import DocumentIndex, FAISSIndexStorage, create_embedding_gateway
from docrag.configs import get_settings
from docrag.core.document_processing import TextChunker
from docrag.core.rag_query import RAGService
from docrag.core.registry import DocumentRegistry
from docrag.observability.logger import configure_logging
from docrag.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Builds the shared index, registry and services once at startup and
    stores them on ``app.state`` for request handlers.
    """
    # Provider SDKs read GOOGLE_API_KEY from the process environment
    load_dotenv()
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Application startup: logging configured")

    try:
        vs = settings.vector_store
        storage = FAISSIndexStorage(store_path=vs.store_path, index_name=vs.index_name)
        index = DocumentIndex(
            storage=storage,
            embedding_gateway=create_embedding_gateway(vs),
            chunker=TextChunker(
                chunk_size=vs.chunk_size,
                chunk_overlap=vs.chunk_overlap,
                max_chunks=vs.max_chunks,
            ),
        )
        await index.initialize()
        logger.info(
            "Document index ready",
            extra={"index_state": index.state.value, "record_count": index.record_count},
        )

        registry = DocumentRegistry(persist_path=settings.upload.registry_path or None)

        app.state.document_index = index
        app.state.document_registry = registry
        app.state.rag_service = RAGService(
            index=index,
            completion=create_completion_gateway(settings.llm),
            top_k=vs.top_k,
        )
        app.state.document_service = DocumentService(index=index, registry=registry)

        logger.info("Application startup complete: all resources initialized")
    except Exception as e:
        logger.exception(
            "Failed to initialize application resources",
            extra={"error": str(e)},
        )
        raise

    yield

    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="DocRAG API",
        description="Upload PDF documents and ask questions answered from their content",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Added first = last to execute
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api")
    app.include_router(health_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "docrag.main:app",
        host="0.0.0.0",
        port=8000,
    )
