"""
Retry Policy - Which failures are retried and how long to wait.

Both functions are pure so they can be tested without a network or a clock.
"""

from __future__ import annotations

from geminikit.config.errors import (
    GeminiNetworkError,
    GeminiServiceError,
    GeminiTimeoutError,
)

__all__ = ["RETRYABLE_STATUS_CODES", "backoff_delay", "is_retryable"]

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


def backoff_delay(retry_number: int, base_seconds: float = 0.5) -> float:
    """
    Delay before the given retry (1 for the first retry).

    Args:
        retry_number: Number of attempts made so far
        base_seconds: Base delay, doubled per attempt

    Returns:
        Seconds to wait: base_seconds * 2 ** retry_number
    """
    return base_seconds * 2**retry_number


def is_retryable(error: BaseException, retry_on_timeout: bool = False) -> bool:
    """Return True if another attempt may succeed after this error."""
    if isinstance(error, GeminiTimeoutError):
        return retry_on_timeout
    if isinstance(error, GeminiServiceError):
        return error.code in RETRYABLE_STATUS_CODES
    return isinstance(error, GeminiNetworkError)
