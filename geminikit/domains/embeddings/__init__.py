"""
Embeddings Domain - Vector embeddings and similarity search helpers.
"""

from .embeddings import EmbeddingsHandler
from .models import EmbeddingOptions, EmbeddingResponse
from .similarity import cosine_similarity, rank_by_similarity

__all__ = [
    "EmbeddingsHandler",
    "EmbeddingOptions",
    "EmbeddingResponse",
    "cosine_similarity",
    "rank_by_similarity",
]
