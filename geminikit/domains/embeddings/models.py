"""
Embedding Models - Options and response wrapper for embedContent.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from .similarity import rank_by_similarity


class EmbeddingOptions(BaseModel):
    """Per-call embedding settings."""

    model: str | None = None

    model_config = {"frozen": True, "extra": "forbid"}


class EmbeddingResponse(BaseModel):
    """Immutable snapshot of an embedContent response."""

    raw: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @property
    def embeddings(self) -> list[list[float]]:
        """One vector per input text, in input order."""
        items = self.raw.get("embeddings")
        if items is None and self.raw.get("embedding") is not None:
            items = [self.raw["embedding"]]
        return [list(item.get("values") or []) for item in items or []]

    def __len__(self) -> int:
        return len(self.embeddings)

    def rank(self, query_vector: list[float]) -> list[tuple[int, float]]:
        """
        Rank the vectors by cosine similarity to a query vector.

        Returns:
            (input index, similarity) pairs, most similar first
        """
        return rank_by_similarity(query_vector, self.embeddings)
