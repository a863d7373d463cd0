"""
Shared fixtures: a fake Gemini service behind httpx.MockTransport.
"""

from __future__ import annotations

import json
from collections.abc import AsyncGenerator
from typing import Any

import httpx
import pytest

from geminikit.client import GeminiClient


class FakeGeminiService:
    """Scripted stand-in for the REST API. Unscripted calls return an empty reply."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._script: list[Any] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self._script.pop(0) if self._script else httpx.Response(200, json={})
        if isinstance(item, Exception):
            raise item
        if callable(item):
            return item(request)
        return item

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def reply(self, body: dict[str, Any], status: int = 200) -> FakeGeminiService:
        self._script.append(httpx.Response(status, json=body))
        return self

    def reply_text(self, *texts: str) -> FakeGeminiService:
        parts = [{"text": text} for text in texts]
        return self.reply(
            {
                "candidates": [
                    {
                        "content": {"role": "model", "parts": parts},
                        "finishReason": "STOP",
                        "safetyRatings": [
                            {"category": "HARM_CATEGORY_HARASSMENT", "probability": "NEGLIGIBLE"}
                        ],
                    }
                ]
            }
        )

    def fail(self, status: int, message: str = "error") -> FakeGeminiService:
        return self.reply({"error": {"code": status, "message": message}}, status=status)

    def raise_error(self, error: Exception) -> FakeGeminiService:
        self._script.append(error)
        return self

    def respond_with(self, handler: Any) -> FakeGeminiService:
        self._script.append(handler)
        return self

    def body(self, index: int = -1) -> dict[str, Any]:
        return json.loads(self.requests[index].content)


@pytest.fixture
def service() -> FakeGeminiService:
    return FakeGeminiService()


@pytest.fixture
def delays() -> list[float]:
    return []


@pytest.fixture
def fake_sleep(delays: list[float]):
    """Record backoff delays instead of sleeping."""

    async def _sleep(seconds: float) -> None:
        delays.append(seconds)

    return _sleep


@pytest.fixture
async def client(
    service: FakeGeminiService, fake_sleep: Any
) -> AsyncGenerator[GeminiClient, None]:
    client = GeminiClient("test-key", transport=service.transport, sleep=fake_sleep)
    yield client
    await client.close()
