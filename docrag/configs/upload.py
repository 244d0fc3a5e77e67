"""
Upload configuration settings.

Limits applied to uploaded files and the location of the document registry.

Dependencies: pydantic, pydantic_settings
System role: Ingestion boundary configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class UploadSettings(BaseSettings):
    """Uploaded document limits and registry persistence."""

    model_config = SettingsConfigDict(
        env_prefix="UPLOAD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    max_file_size_bytes: int = Field(
        default=10 * 1024 * 1024,
        gt=0,
        description="Maximum accepted upload size (10MB default)",
    )
    allowed_extensions: list[str] = Field(
        default=[".pdf"],
        description="Accepted file extensions (lower case, with dot)",
    )
    registry_path: str = Field(
        default="./vector_store/registry.json",
        description="JSON file backing the document registry (empty disables persistence)",
    )
