"""
Chat Session - Multi-turn conversation state.

The turn log only ever grows by ``send`` and is emptied by ``clear``.
A user turn is recorded before the request and the model turn only after a
successful response, so a failed ``send`` leaves the user turn unanswered.
Concurrent ``send`` calls on one session are serialized.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from .contracts import ApiClient
from .models import GenerationOptions, GenerationResponse, Role, Turn
from .payloads import generate_content_path, resolve_options

logger = logging.getLogger(__name__)

__all__ = ["ChatSession"]


class ChatSession:
    """
    Conversation with a persistent turn history.

    Example:
        >>> chat = client.text.chat(system_prompt="You are a helpful assistant.")
        >>> reply = await chat.send("How do I create a coroutine in Python?")
        >>> reply = await chat.send("Show an example with asyncio.gather.")
        >>> len(chat.get_history())
        4
    """

    def __init__(
        self,
        client: ApiClient,
        system_prompt: str | None = None,
        model: str | None = None,
    ) -> None:
        self.client = client
        self.model = model or client.model
        self.system_prompt = system_prompt or ""
        self._turns: list[Turn] = []
        self._lock = asyncio.Lock()

    async def send(
        self,
        message: str,
        options: GenerationOptions | None = None,
        **overrides: Any,
    ) -> GenerationResponse:
        """
        Send a message in this chat session.

        Args:
            message: User message
            options: Generation options (the session model is always used)
            **overrides: Individual option overrides

        Returns:
            The model's response

        Raises:
            GeminiError: Request failed; the user turn stays in the history
        """
        opts = resolve_options(options, overrides)

        async with self._lock:
            # clear() may swap the log while the request is in flight
            turns = self._turns
            turns.append(Turn.from_text(Role.USER, message))

            contents = [turn.to_payload() for turn in turns]
            if self.system_prompt:
                system_turn = Turn.from_text(Role.SYSTEM, self.system_prompt)
                contents.insert(0, system_turn.to_payload())

            payload = {
                "contents": contents,
                "generationConfig": opts.generation_config(include_stop_sequences=False),
            }

            logger.debug(
                "Chat send: model=%s, turns=%d", self.model, len(turns)
            )
            data = await self.client.request(generate_content_path(self.model), payload)
            response = GenerationResponse.from_raw(data)

            turns.append(Turn.from_text(Role.MODEL, response.text))
            return response

    def clear(self) -> ChatSession:
        """Clear chat history."""
        self._turns = []
        return self

    def get_history(self) -> list[Turn]:
        """Return a copy of the turn history (turns are immutable)."""
        return list(self._turns)

    def __len__(self) -> int:
        return len(self._turns)
