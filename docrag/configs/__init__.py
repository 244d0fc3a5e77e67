"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from docrag.configs.llm import LLMSettings
from docrag.configs.settings import Settings, get_settings
from docrag.configs.upload import UploadSettings
from docrag.configs.vector_store import VectorStoreSettings

__all__ = [
    "LLMSettings",
    "Settings",
    "UploadSettings",
    "VectorStoreSettings",
    "get_settings",
]
