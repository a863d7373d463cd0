"""
Code Handler - Prompt templates for code generation, analysis and review.
"""

from __future__ import annotations

from typing import Any

from .models import CodeResponse, GenerationOptions, GenerationResponse
from .payloads import resolve_options
from .text import TextHandler

__all__ = ["CodeHandler"]

# Lower than the text default to keep generated code stable
CODE_TEMPERATURE = 0.2

GENERATE_TEMPLATE = (
    "Generate {language} code that {description}. "
    "Provide only the code with no explanations."
)
ANALYZE_TEMPLATE = "Analyze this code and explain what it does:\n\n{code}"
IMPROVE_TEMPLATE = "Suggest improvements for this code:\n\n{code}"


class CodeHandler:
    """
    Code-oriented wrapper around TextHandler.

    Example:
        >>> result = await client.code.generate(
        ...     "calculates the Fibonacci sequence", "python"
        ... )
        >>> print(result.code)
    """

    def __init__(self, text: TextHandler) -> None:
        self.text = text

    async def generate(
        self,
        description: str,
        language: str,
        options: GenerationOptions | None = None,
        **overrides: Any,
    ) -> CodeResponse:
        """
        Generate code from a description.

        Temperature defaults to 0.2 unless set by the caller.
        """
        prompt = GENERATE_TEMPLATE.format(language=language, description=description)
        opts = resolve_options(
            options, overrides, defaults={"temperature": CODE_TEMPERATURE}
        )

        response = await self.text.generate(prompt, opts)
        return CodeResponse.from_response(response)

    async def analyze(
        self,
        code: str,
        options: GenerationOptions | None = None,
        **overrides: Any,
    ) -> GenerationResponse:
        """Explain what a piece of code does."""
        prompt = ANALYZE_TEMPLATE.format(code=code)
        return await self.text.generate(prompt, options, **overrides)

    async def improve(
        self,
        code: str,
        options: GenerationOptions | None = None,
        **overrides: Any,
    ) -> GenerationResponse:
        """Suggest improvements to a piece of code."""
        prompt = IMPROVE_TEMPLATE.format(code=code)
        return await self.text.generate(prompt, options, **overrides)
