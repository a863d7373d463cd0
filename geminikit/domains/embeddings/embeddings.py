"""
Embeddings Handler - Vector embeddings over ``models/{model}:embedContent``.

The returned vectors keep a one-to-one, order-preserving correspondence with
the input texts.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from geminikit.config.errors import GeminiValidationError
from geminikit.domains.generation.contracts import ApiClient

from .models import EmbeddingOptions, EmbeddingResponse

logger = logging.getLogger(__name__)

__all__ = ["EmbeddingsHandler"]


class EmbeddingsHandler:
    """
    Embedding generation.

    Example:
        >>> texts = ["Python is a language", "Rust has a borrow checker"]
        >>> response = await client.embeddings.generate(texts)
        >>> query = await client.embeddings.generate("memory safety")
        >>> response.rank(query.embeddings[0])
        [(1, 0.82), (0, 0.41)]
    """

    def __init__(self, client: ApiClient) -> None:
        self.client = client

    async def generate(
        self,
        texts: str | Sequence[str],
        options: EmbeddingOptions | None = None,
        **overrides: Any,
    ) -> EmbeddingResponse:
        """
        Generate embeddings for one text or a sequence of texts.

        Args:
            texts: Text or texts to embed
            options: Embedding options
            **overrides: Individual option overrides (model=...)

        Returns:
            EmbeddingResponse with one vector per input

        Raises:
            GeminiValidationError: Non-string input or unknown option
        """
        text_list = [texts] if isinstance(texts, str) else list(texts)
        if not all(isinstance(text, str) for text in text_list):
            raise GeminiValidationError("Embedding inputs must be strings")

        data: dict[str, Any] = options.model_dump(exclude_unset=True) if options else {}
        data.update(overrides)
        try:
            opts = EmbeddingOptions.model_validate(data)
        except ValidationError as e:
            raise GeminiValidationError(f"Invalid embedding options: {e}") from e

        model = opts.model or self.client.config.embedding_model
        payload = {
            "model": f"models/{model}",
            "content": {"parts": [{"text": text} for text in text_list]},
        }

        logger.debug("Embedding %d text(s): model=%s", len(text_list), model)
        body = await self.client.request(f"models/{model}:embedContent", payload)
        return EmbeddingResponse(raw=body)
