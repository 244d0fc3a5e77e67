"""
Language model configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Completion model configuration for answer generation
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """Chat model used to generate grounded answers."""

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        protected_namespaces=(),
    )

    model_id: str = Field(default="gemini-2.5-flash", description="Google chat model ID")
    temperature: float = Field(
        default=0.3,
        ge=0.0,
        le=2.0,
        description="Sampling temperature (moderate, favors grounded answers)",
    )
    max_output_tokens: int = Field(default=1024, gt=0, description="Answer length limit")
    timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Upper bound for a single completion request",
    )
