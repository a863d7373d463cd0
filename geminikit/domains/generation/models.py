"""
Generation Models - Data types for content generation and chat.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Union

from pydantic import AliasChoices, BaseModel, Field


class Role(str, Enum):
    """Author of a conversation turn."""

    USER = "user"
    MODEL = "model"
    SYSTEM = "system"


class TextPart(BaseModel):
    """Plain text content part."""

    text: str

    model_config = {"frozen": True}


class InlineData(BaseModel):
    """Base64-encoded binary payload embedded in the request."""

    mime_type: str = Field(
        default="image/jpeg",
        validation_alias=AliasChoices("mime_type", "mimeType"),
    )
    data: str

    model_config = {"frozen": True}


class InlineDataPart(BaseModel):
    """Inline binary (image) content part."""

    inline_data: InlineData = Field(
        validation_alias=AliasChoices("inline_data", "inlineData"),
    )

    model_config = {"frozen": True}


Part = Union[TextPart, InlineDataPart]


class ImageBlob(BaseModel):
    """Raw image bytes with their MIME type."""

    data: bytes
    mime_type: str = "image/jpeg"

    model_config = {"frozen": True}


class Turn(BaseModel):
    """One message in a conversation."""

    role: Role
    parts: tuple[Part, ...]

    model_config = {"frozen": True}

    @classmethod
    def from_text(cls, role: Role, text: str) -> Turn:
        return cls(role=role, parts=(TextPart(text=text),))

    @property
    def text(self) -> str:
        return "".join(p.text for p in self.parts if isinstance(p, TextPart))

    def to_payload(self) -> dict[str, Any]:
        """Wire representation: {"role": ..., "parts": [...]}."""
        return {
            "role": self.role.value,
            "parts": [part.model_dump() for part in self.parts],
        }


class Prompt(BaseModel):
    """Structured prompt: explicit parts, or a single text."""

    parts: list[Part] | None = None
    text: str | None = ""

    model_config = {"frozen": True}

    def resolve_parts(self) -> list[Part]:
        if self.parts is not None:
            return list(self.parts)
        return [TextPart(text=self.text or "")]


class GenerationOptions(BaseModel):
    """Per-call generation settings. Unset fields keep their defaults."""

    temperature: float = 0.7
    top_k: int = 40
    top_p: float = 0.95
    max_output_tokens: int = 1024
    stop_sequences: list[str] = Field(default_factory=list)
    safety_settings: list[dict[str, Any]] = Field(default_factory=list)
    model: str | None = None

    model_config = {"frozen": True, "extra": "forbid"}

    def generation_config(self, include_stop_sequences: bool = True) -> dict[str, Any]:
        """Build the ``generationConfig`` request block."""
        config: dict[str, Any] = {
            "temperature": self.temperature,
            "topK": self.top_k,
            "topP": self.top_p,
            "maxOutputTokens": self.max_output_tokens,
        }
        if include_stop_sequences:
            config["stopSequences"] = list(self.stop_sequences)
        return config


class Candidate(BaseModel):
    """One alternative output returned for a request."""

    parts: list[dict[str, Any]] = Field(default_factory=list)
    safety_ratings: list[dict[str, Any]] = Field(default_factory=list)
    finish_reason: str | None = None

    model_config = {"frozen": True}

    @classmethod
    def from_raw(cls, raw: dict[str, Any]) -> Candidate:
        content = raw.get("content") or {}
        return cls(
            parts=content.get("parts") or [],
            safety_ratings=raw.get("safetyRatings") or [],
            finish_reason=raw.get("finishReason"),
        )

    @property
    def text(self) -> str:
        return "".join(part.get("text") or "" for part in self.parts)


class GenerationResponse(BaseModel):
    """Immutable snapshot of a generateContent response."""

    raw: dict[str, Any] = Field(default_factory=dict)
    candidates: list[Candidate] = Field(default_factory=list)

    model_config = {"frozen": True}

    @classmethod
    def from_raw(cls, raw: dict[str, Any]) -> GenerationResponse:
        return cls(
            raw=raw,
            candidates=[Candidate.from_raw(c) for c in raw.get("candidates") or []],
        )

    @property
    def text(self) -> str:
        """Text parts of the first candidate, concatenated in order."""
        if not self.candidates:
            return ""
        return self.candidates[0].text

    @property
    def safety_ratings(self) -> list[dict[str, Any]]:
        if not self.candidates:
            return []
        return self.candidates[0].safety_ratings

    @property
    def finish_reason(self) -> str | None:
        if not self.candidates:
            return None
        return self.candidates[0].finish_reason

    @property
    def usage(self) -> dict[str, Any]:
        return self.raw.get("usageMetadata") or {}

    @property
    def prompt_tokens(self) -> int:
        return int(self.usage.get("promptTokenCount", 0))

    @property
    def completion_tokens(self) -> int:
        return int(self.usage.get("candidatesTokenCount", 0))

    @property
    def total_tokens(self) -> int:
        return int(self.usage.get("totalTokenCount", 0))

    def parse_json(self) -> Any:
        """
        Parse the generated text as JSON.

        Falls back to the outermost {...} block when the model wraps the
        JSON in prose or a code fence.

        Raises:
            json.JSONDecodeError: No JSON object could be parsed
        """
        text = self.text
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            start = text.find("{")
            end = text.rfind("}") + 1
            if start >= 0 and end > start:
                return json.loads(text[start:end])
            raise


class CodeResponse(GenerationResponse):
    """Generation response with the generated code extracted."""

    code: str = ""

    @classmethod
    def from_response(cls, response: GenerationResponse) -> CodeResponse:
        return cls(raw=response.raw, candidates=response.candidates, code=response.text)
