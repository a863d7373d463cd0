"""
Settings - SDK configuration using Pydantic Settings.

Loads from GEMINI_* environment variables and .env files.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-1.5-pro"
DEFAULT_EMBEDDING_MODEL = "embedding-001"


class Settings(BaseSettings):
    """Environment-backed defaults for GeminiClient.from_settings()."""

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    embedding_model: str = DEFAULT_EMBEDDING_MODEL

    # Retry / timeout
    max_retries: int = 3
    timeout_seconds: float = 30.0
    backoff_base_seconds: float = 0.5
    retry_on_timeout: bool = False

    model_config = SettingsConfigDict(
        env_prefix="GEMINI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
