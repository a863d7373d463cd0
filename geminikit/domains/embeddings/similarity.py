"""
Vector similarity helpers for semantic search over embeddings.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

__all__ = ["cosine_similarity", "rank_by_similarity"]


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine similarity of two vectors. Zero-norm vectors score 0.0."""
    vec_a = np.asarray(a, dtype=np.float32)
    vec_b = np.asarray(b, dtype=np.float32)
    if vec_a.shape != vec_b.shape:
        raise ValueError(f"Dimension mismatch: {vec_a.shape} vs {vec_b.shape}")

    norm = float(np.linalg.norm(vec_a) * np.linalg.norm(vec_b))
    if norm == 0.0:
        return 0.0
    return float(np.dot(vec_a, vec_b) / norm)


def rank_by_similarity(
    query: Sequence[float],
    vectors: Sequence[Sequence[float]],
) -> list[tuple[int, float]]:
    """Return (index, similarity) pairs sorted from most to least similar."""
    scores = [(i, cosine_similarity(query, vec)) for i, vec in enumerate(vectors)]
    return sorted(scores, key=lambda item: item[1], reverse=True)
