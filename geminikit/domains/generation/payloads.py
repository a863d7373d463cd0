"""
Payload helpers shared by the generation handlers.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from geminikit.config.errors import GeminiValidationError

from .models import GenerationOptions, Part, Prompt, TextPart

__all__ = [
    "PromptInput",
    "generate_content_path",
    "resolve_options",
    "resolve_prompt",
]

PromptInput = str | Prompt | Mapping[str, Any]


def generate_content_path(model: str) -> str:
    return f"models/{model}:generateContent"


def resolve_options(
    options: GenerationOptions | None,
    overrides: Mapping[str, Any],
    defaults: Mapping[str, Any] | None = None,
) -> GenerationOptions:
    """
    Merge an options object, keyword overrides and handler defaults.

    Precedence: overrides > fields set on ``options`` > ``defaults`` >
    GenerationOptions defaults.

    Raises:
        GeminiValidationError: Unknown option or invalid value
    """
    data: dict[str, Any] = dict(defaults or {})
    if options is not None:
        data.update(options.model_dump(exclude_unset=True))
    data.update(overrides)
    try:
        return GenerationOptions.model_validate(data)
    except ValidationError as e:
        raise GeminiValidationError(f"Invalid generation options: {e}") from e


def resolve_prompt(prompt: PromptInput) -> list[Part]:
    """
    Turn a prompt into content parts.

    Raises:
        GeminiValidationError: Unsupported prompt type or malformed parts
    """
    if isinstance(prompt, str):
        return [TextPart(text=prompt)]
    if isinstance(prompt, Prompt):
        return prompt.resolve_parts()
    if isinstance(prompt, Mapping):
        try:
            return Prompt.model_validate(prompt).resolve_parts()
        except ValidationError as e:
            raise GeminiValidationError(f"Invalid prompt: {e}") from e
    raise GeminiValidationError(
        f"Prompt must be a string, Prompt or mapping, not {type(prompt).__name__}"
    )
