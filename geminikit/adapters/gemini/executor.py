"""
Request Executor - The single place that talks HTTP to the Gemini REST API.

Features:
- Async operations with a shared, lazily created httpx client
- API key sent as the ``key`` query parameter (never logged)
- Per-attempt timeout
- Automatic retries with exponential backoff for transient failures
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
)

from geminikit.config.errors import (
    GeminiNetworkError,
    GeminiServiceError,
    GeminiTimeoutError,
)

from .models import ClientConfig
from .retry import backoff_delay, is_retryable

logger = logging.getLogger(__name__)

__all__ = ["RequestExecutor", "SleepFunc"]

SleepFunc = Callable[[float], Awaitable[None]]


class RequestExecutor:
    """
    Performs one logical API call with timeout and retry handling.

    Example:
        >>> executor = RequestExecutor(ClientConfig(api_key="..."))
        >>> body = await executor.execute(
        ...     "models/gemini-1.5-pro:generateContent",
        ...     {"contents": [{"parts": [{"text": "Hi"}]}]},
        ... )
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: SleepFunc | None = None,
    ) -> None:
        """
        Initialize executor.

        Args:
            config: Client configuration (shared, read-only)
            transport: Optional httpx transport (tests use httpx.MockTransport)
            sleep: Async sleep used between retries. Defaults to asyncio.sleep.
        """
        self.config = config
        self._transport = transport
        self._sleep = sleep or asyncio.sleep
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.config.timeout_seconds,
                transport=self._transport,
            )
        return self._client

    def _url(self, path: str) -> str:
        return f"{self.config.base_url.rstrip('/')}/{path.lstrip('/')}"

    async def execute(
        self,
        path: str,
        payload: dict[str, Any] | None = None,
        method: str = "POST",
    ) -> dict[str, Any]:
        """
        Execute a request, retrying transient failures.

        Args:
            path: Endpoint path relative to the base URL
            payload: JSON body (ignored for GET)
            method: HTTP method

        Returns:
            Decoded JSON response body

        Raises:
            GeminiServiceError: Non-success HTTP status
            GeminiTimeoutError: Attempt deadline elapsed
            GeminiNetworkError: Transport failure
        """
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.config.max_retries + 1),
            wait=self._wait,
            retry=retry_if_exception(self._should_retry),
            sleep=self._sleep,
            before_sleep=self._log_retry,
            reraise=True,
        )

        body: dict[str, Any] = {}
        async for attempt in retrying:
            with attempt:
                body = await self._send(
                    method, path, payload, attempt.retry_state.attempt_number
                )
        return body

    def _wait(self, retry_state: RetryCallState) -> float:
        return backoff_delay(retry_state.attempt_number, self.config.backoff_base_seconds)

    def _should_retry(self, error: BaseException) -> bool:
        return is_retryable(error, retry_on_timeout=self.config.retry_on_timeout)

    def _log_retry(self, retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
        logger.warning(
            "Retrying in %.1fs (attempt %d/%d): %s",
            delay,
            retry_state.attempt_number,
            self.config.max_retries + 1,
            error,
        )

    async def _send(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None,
        attempt_number: int,
    ) -> dict[str, Any]:
        """Single attempt: send, then map failures onto the error taxonomy."""
        client = self._get_client()
        logger.debug("%s %s (attempt %d)", method, path, attempt_number)

        try:
            response = await client.request(
                method,
                self._url(path),
                params={"key": self.config.api_key},
                headers={"Content-Type": "application/json"},
                json=payload if method != "GET" else None,
            )
        except httpx.TimeoutException as e:
            raise GeminiTimeoutError("Request timed out") from e
        except httpx.TransportError as e:
            raise GeminiNetworkError(f"Network error: {e}") from e

        if not response.is_success:
            error = self._service_error(response)
            logger.error("Gemini error: %s %s", response.status_code, error.message)
            raise error

        try:
            data = response.json()
        except ValueError as e:
            raise GeminiServiceError(
                "Invalid JSON in response", code=response.status_code
            ) from e

        if not isinstance(data, dict):
            raise GeminiServiceError(
                "Unexpected response body", code=response.status_code
            )
        return data

    @staticmethod
    def _service_error(response: httpx.Response) -> GeminiServiceError:
        """Build a service error from a non-success response."""
        message = response.reason_phrase or f"HTTP {response.status_code}"
        details: dict[str, Any] = {}

        try:
            data = response.json()
        except ValueError:
            data = None
            if response.text:
                message = response.text

        if isinstance(data, dict):
            err = data.get("error")
            if isinstance(err, dict):
                message = err.get("message") or message
                if err.get("status"):
                    details["status"] = err["status"]
            elif isinstance(err, str) and err:
                message = err

        return GeminiServiceError(message, code=response.status_code, details=details)

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
