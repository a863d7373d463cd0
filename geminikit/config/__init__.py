"""
Configuration - SDK settings and error taxonomy.
"""

from .errors import (
    ErrorKind,
    GeminiConfigError,
    GeminiError,
    GeminiNetworkError,
    GeminiServiceError,
    GeminiTimeoutError,
    GeminiValidationError,
)
from .settings import (
    DEFAULT_BASE_URL,
    DEFAULT_EMBEDDING_MODEL,
    DEFAULT_MODEL,
    Settings,
    get_settings,
)

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "DEFAULT_BASE_URL",
    "DEFAULT_MODEL",
    "DEFAULT_EMBEDDING_MODEL",
    # Errors
    "ErrorKind",
    "GeminiError",
    "GeminiConfigError",
    "GeminiValidationError",
    "GeminiServiceError",
    "GeminiTimeoutError",
    "GeminiNetworkError",
]
