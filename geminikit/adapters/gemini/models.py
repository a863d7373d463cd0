"""
Gemini Models - Client configuration for the REST executor.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from geminikit.config.settings import (
    DEFAULT_BASE_URL,
    DEFAULT_EMBEDDING_MODEL,
    DEFAULT_MODEL,
)


class ClientConfig(BaseModel):
    """Configuration for GeminiClient. Immutable after construction."""

    api_key: str = Field(min_length=1, repr=False)
    base_url: str = Field(default=DEFAULT_BASE_URL)
    model: str = Field(default=DEFAULT_MODEL, min_length=1)
    embedding_model: str = Field(default=DEFAULT_EMBEDDING_MODEL, min_length=1)
    max_retries: int = Field(default=3, ge=0)
    timeout_seconds: float = Field(default=30.0, gt=0)
    backoff_base_seconds: float = Field(default=0.5, gt=0)
    # Timeouts are raised immediately unless this is enabled.
    retry_on_timeout: bool = False

    model_config = {"frozen": True, "extra": "forbid"}
