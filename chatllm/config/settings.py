"""
Settings - Process-wide configuration using Pydantic Settings.

Loads from CHATLLM_* environment variables and .env files. Per-provider
credentials and sampling parameters come from each provider's own
parameter blob, not from here.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # Gemini model selection
    gemini_default_model: str = "gemini-pro"
    gemini_vision_model: str = "gemini-pro-vision"

    # Deadline for a single outbound request when the caller sets none
    request_timeout_seconds: float = Field(default=300.0, gt=0)

    # Raise on malformed provider parameters instead of using defaults
    strict_config: bool = False

    model_config = SettingsConfigDict(
        env_prefix="CHATLLM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
