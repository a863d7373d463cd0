"""
Generation Domain - Text, code, vision and chat handlers.
"""

from .chat import ChatSession
from .code import CodeHandler
from .contracts import ApiClient
from .models import (
    Candidate,
    CodeResponse,
    GenerationOptions,
    GenerationResponse,
    ImageBlob,
    InlineData,
    InlineDataPart,
    Part,
    Prompt,
    Role,
    TextPart,
    Turn,
)
from .text import TextHandler
from .vision import VisionHandler

__all__ = [
    # Handlers
    "TextHandler",
    "CodeHandler",
    "VisionHandler",
    "ChatSession",
    # Contracts
    "ApiClient",
    # Models
    "Candidate",
    "CodeResponse",
    "GenerationOptions",
    "GenerationResponse",
    "ImageBlob",
    "InlineData",
    "InlineDataPart",
    "Part",
    "Prompt",
    "Role",
    "TextPart",
    "Turn",
]
