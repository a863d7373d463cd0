"""
Error Taxonomy - Consistent error kinds across the SDK.

Usage:
    from geminikit.config.errors import GeminiServiceError

    try:
        await client.text.generate("Hello")
    except GeminiServiceError as e:
        print(e.code, e.message)
"""

from __future__ import annotations

from enum import Enum
from typing import Any

__all__ = [
    "ErrorKind",
    "GeminiError",
    "GeminiConfigError",
    "GeminiValidationError",
    "GeminiServiceError",
    "GeminiTimeoutError",
    "GeminiNetworkError",
]


class ErrorKind(str, Enum):
    """Machine-readable error kinds."""

    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    SERVICE = "service"
    TIMEOUT = "timeout"
    NETWORK = "network"


class GeminiError(Exception):
    """Base exception carrying a message and an optional numeric code."""

    kind: ErrorKind = ErrorKind.SERVICE

    def __init__(
        self,
        message: str,
        code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        if code is None:
            super().__init__(message)
        else:
            super().__init__(f"[{code}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to a serializable dictionary."""
        return {
            "kind": self.kind.value,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class GeminiConfigError(GeminiError):
    """Missing credential or invalid client options."""

    kind = ErrorKind.CONFIGURATION


class GeminiValidationError(GeminiError):
    """Malformed caller input, raised before any request is sent."""

    kind = ErrorKind.VALIDATION


class GeminiServiceError(GeminiError):
    """Non-success HTTP status returned by the service."""

    kind = ErrorKind.SERVICE


class GeminiTimeoutError(GeminiError):
    """Per-attempt deadline elapsed."""

    kind = ErrorKind.TIMEOUT

    def __init__(
        self,
        message: str = "Request timed out",
        code: int | None = 408,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class GeminiNetworkError(GeminiError):
    """Transport failure with no response received."""

    kind = ErrorKind.NETWORK
