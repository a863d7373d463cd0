"""
Text Handler - Single-turn text generation and chat session factory.
"""

from __future__ import annotations

import logging
from typing import Any

from .chat import ChatSession
from .contracts import ApiClient
from .models import GenerationOptions, GenerationResponse
from .payloads import (
    PromptInput,
    generate_content_path,
    resolve_options,
    resolve_prompt,
)

logger = logging.getLogger(__name__)

__all__ = ["TextHandler"]


class TextHandler:
    """
    Text generation over ``models/{model}:generateContent``.

    Example:
        >>> response = await client.text.generate(
        ...     "Write a short poem about artificial intelligence.",
        ...     temperature=0.8,
        ... )
        >>> print(response.text)
    """

    def __init__(self, client: ApiClient) -> None:
        self.client = client

    async def generate(
        self,
        prompt: PromptInput,
        options: GenerationOptions | None = None,
        **overrides: Any,
    ) -> GenerationResponse:
        """
        Generate text content from a prompt.

        Args:
            prompt: Text, a Prompt, or a mapping with ``parts`` or ``text``
            options: Generation options
            **overrides: Individual option overrides (temperature=..., etc.)

        Returns:
            GenerationResponse

        Raises:
            GeminiValidationError: Unsupported prompt or options
        """
        parts = resolve_prompt(prompt)
        opts = resolve_options(options, overrides)
        model = opts.model or self.client.model

        payload = {
            "contents": [{"parts": [part.model_dump() for part in parts]}],
            "generationConfig": opts.generation_config(),
            "safetySettings": list(opts.safety_settings),
        }

        logger.debug("Generating text: model=%s, parts=%d", model, len(parts))
        data = await self.client.request(generate_content_path(model), payload)
        return GenerationResponse.from_raw(data)

    def chat(
        self,
        system_prompt: str | None = None,
        model: str | None = None,
    ) -> ChatSession:
        """
        Start a conversation (chat) session.

        Args:
            system_prompt: Directive prepended to every request
            model: Override the client's default model

        Returns:
            A new ChatSession bound to this client
        """
        return ChatSession(self.client, system_prompt=system_prompt, model=model)
