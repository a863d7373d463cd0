"""
Generation Contracts - Interfaces the handlers depend on.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from geminikit.adapters.gemini.models import ClientConfig


@runtime_checkable
class ApiClient(Protocol):
    """Contract for the client the handlers delegate to."""

    config: ClientConfig
    model: str

    async def request(
        self,
        path: str,
        payload: dict[str, Any] | None = None,
        method: str = "POST",
    ) -> dict[str, Any]:
        """
        Execute one logical API call.

        Args:
            path: Endpoint path, e.g. "models/gemini-1.5-pro:generateContent"
            payload: JSON request body
            method: HTTP method

        Returns:
            Decoded JSON response body
        """
        ...
