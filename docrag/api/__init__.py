"""
HTTP API package.

Assembles the /api routers into a single api_router.

Dependencies: fastapi, docrag.api.routers
System role: API router assembly
"""

from fastapi import APIRouter

from .routers import chat_router, documents_router

api_router = APIRouter()
api_router.include_router(documents_router)
api_router.include_router(chat_router)

__all__ = ["api_router"]
