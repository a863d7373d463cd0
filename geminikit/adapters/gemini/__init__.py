"""
Gemini Adapter - REST transport for the Gemini API.

This is the ONLY place that performs HTTP calls.
All handlers delegate to the RequestExecutor.
"""

from .executor import RequestExecutor, SleepFunc
from .models import ClientConfig
from .retry import RETRYABLE_STATUS_CODES, backoff_delay, is_retryable

__all__ = [
    "RequestExecutor",
    "SleepFunc",
    "ClientConfig",
    "RETRYABLE_STATUS_CODES",
    "backoff_delay",
    "is_retryable",
]
