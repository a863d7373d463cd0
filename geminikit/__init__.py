"""
geminikit - Async Python SDK for the Gemini generative-AI REST API.

Example:
    >>> from geminikit import GeminiClient
    >>> client = GeminiClient("YOUR_API_KEY")
    >>> response = await client.text.generate("Write a haiku about autumn.")
    >>> print(response.text)
"""

from .client import GeminiClient
from .config import (
    ErrorKind,
    GeminiConfigError,
    GeminiError,
    GeminiNetworkError,
    GeminiServiceError,
    GeminiTimeoutError,
    GeminiValidationError,
    Settings,
    get_settings,
)
from .domains.embeddings import (
    EmbeddingOptions,
    EmbeddingResponse,
    cosine_similarity,
    rank_by_similarity,
)
from .domains.generation import (
    ChatSession,
    CodeResponse,
    GenerationOptions,
    GenerationResponse,
    ImageBlob,
    Prompt,
    Role,
    Turn,
)

__version__ = "0.1.0"
__all__ = [
    "__version__",
    "GeminiClient",
    "Settings",
    "get_settings",
    # Errors
    "ErrorKind",
    "GeminiError",
    "GeminiConfigError",
    "GeminiValidationError",
    "GeminiServiceError",
    "GeminiTimeoutError",
    "GeminiNetworkError",
    # Generation
    "ChatSession",
    "CodeResponse",
    "GenerationOptions",
    "GenerationResponse",
    "ImageBlob",
    "Prompt",
    "Role",
    "Turn",
    # Embeddings
    "EmbeddingOptions",
    "EmbeddingResponse",
    "cosine_similarity",
    "rank_by_similarity",
]
