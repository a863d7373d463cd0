"""
Gemini Client - Top-level entry point of the SDK.

Authentication:
- API key passed to the constructor, or GEMINI_API_KEY via from_settings()
- The key travels as the ``key`` query parameter

Features:
- Async operations with connection pooling
- Automatic retries with exponential backoff
- Text, code, vision, embeddings and chat handlers
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from geminikit.adapters.gemini import ClientConfig, RequestExecutor, SleepFunc
from geminikit.config.errors import GeminiConfigError
from geminikit.config.settings import Settings, get_settings
from geminikit.domains.embeddings import EmbeddingsHandler
from geminikit.domains.generation import (
    CodeHandler,
    TextHandler,
    VisionHandler,
)

logger = logging.getLogger(__name__)

__all__ = ["GeminiClient"]


class GeminiClient:
    """
    Client for the Gemini REST API.

    Example:
        >>> async with GeminiClient("YOUR_API_KEY") as client:
        ...     response = await client.text.generate("Hello")
        ...     print(response.text)
        ...
        ...     chat = client.text.chat(system_prompt="You are terse.")
        ...     reply = await chat.send("What is a coroutine?")
    """

    def __init__(
        self,
        api_key: str,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: SleepFunc | None = None,
        **options: Any,
    ) -> None:
        """
        Initialize Gemini client.

        Args:
            api_key: Gemini API key (required)
            transport: Optional httpx transport, mainly for tests
            sleep: Async sleep used for retry backoff
            **options: ClientConfig fields (model, base_url, max_retries,
                timeout_seconds, embedding_model, backoff_base_seconds,
                retry_on_timeout)

        Raises:
            GeminiConfigError: Missing API key or invalid options
        """
        if not isinstance(api_key, str) or not api_key.strip():
            raise GeminiConfigError("API key is required")

        try:
            self.config = ClientConfig(api_key=api_key, **options)
        except ValidationError as e:
            raise GeminiConfigError(f"Invalid client configuration: {e}") from e

        self.model = self.config.model
        self._executor = RequestExecutor(self.config, transport=transport, sleep=sleep)

        # Specialized handlers
        self.text = TextHandler(self)
        self.code = CodeHandler(self.text)
        self.vision = VisionHandler(self)
        self.embeddings = EmbeddingsHandler(self)

        logger.info(
            "GeminiClient initialized: model=%s, max_retries=%d, timeout=%.1fs",
            self.model,
            self.config.max_retries,
            self.config.timeout_seconds,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        **overrides: Any,
    ) -> GeminiClient:
        """
        Build a client from GEMINI_* environment settings.

        Args:
            settings: Settings instance. Uses get_settings() if None.
            **overrides: Constructor arguments taking precedence over settings
        """
        settings = settings or get_settings()
        kwargs: dict[str, Any] = settings.model_dump()
        kwargs.update(overrides)
        api_key = kwargs.pop("api_key")
        return cls(api_key, **kwargs)

    async def request(
        self,
        path: str,
        payload: dict[str, Any] | None = None,
        method: str = "POST",
    ) -> dict[str, Any]:
        """Make a request to the Gemini API."""
        return await self._executor.execute(path, payload, method=method)

    async def list_models(self) -> list[dict[str, Any]]:
        """Get available models from the Gemini API."""
        data = await self.request("models", method="GET")
        return data.get("models") or []

    def set_model(self, model: str) -> GeminiClient:
        """Set the default generation model for this client."""
        if not model:
            raise GeminiConfigError("Model name is required")
        self.model = model
        return self

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._executor.close()

    async def __aenter__(self) -> GeminiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
