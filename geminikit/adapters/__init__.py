"""
Adapters - External service integrations.

All HTTP calls are wrapped here to isolate the handlers from transport details.
"""

from .gemini import ClientConfig, RequestExecutor

__all__ = [
    "ClientConfig",
    "RequestExecutor",
]
