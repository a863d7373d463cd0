"""
Vision Handler - Image-grounded generation.

Accepted image inputs:
- "data:" URIs (MIME type and payload are taken from the URI)
- http(s) URLs, passed through as inline data
- bytes / bytearray / memoryview
- ImageBlob (bytes plus MIME type)
- pathlib.Path, read off the event loop
"""

from __future__ import annotations

import asyncio
import base64
import logging
import mimetypes
from pathlib import Path
from typing import Any, Union
from urllib.parse import unquote_to_bytes

from geminikit.config.errors import GeminiValidationError

from .contracts import ApiClient
from .models import (
    GenerationOptions,
    GenerationResponse,
    ImageBlob,
    InlineData,
    InlineDataPart,
    TextPart,
)
from .payloads import generate_content_path, resolve_options

logger = logging.getLogger(__name__)

__all__ = ["VisionHandler", "ImageInput", "DEFAULT_VISION_PROMPT"]

DEFAULT_VISION_PROMPT = "Describe this image in detail"
DEFAULT_IMAGE_MIME_TYPE = "image/jpeg"

ImageInput = Union[str, bytes, bytearray, memoryview, ImageBlob, Path]


def _encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def _parse_data_uri(uri: str) -> InlineData:
    """Split ``data:[<mime>][;base64],<payload>`` into inline data."""
    header, sep, payload = uri[len("data:"):].partition(",")
    if not sep:
        raise GeminiValidationError("Malformed data URI: missing ','")

    params = header.split(";")
    mime_type = params[0] or DEFAULT_IMAGE_MIME_TYPE
    if "base64" in params[1:]:
        data = payload.strip()
    else:
        data = _encode(unquote_to_bytes(payload))
    return InlineData(mime_type=mime_type, data=data)


class VisionHandler:
    """
    Image analysis over ``models/{model}:generateContent``.

    Example:
        >>> analysis = await client.vision.analyze(
        ...     Path("photo.png"), "What objects are in this image?"
        ... )
        >>> print(analysis.text)
    """

    def __init__(self, client: ApiClient) -> None:
        self.client = client

    async def analyze(
        self,
        image: ImageInput,
        prompt: str = DEFAULT_VISION_PROMPT,
        options: GenerationOptions | None = None,
        **overrides: Any,
    ) -> GenerationResponse:
        """
        Analyze an image with a text prompt.

        Args:
            image: Data URI, URL, raw bytes, ImageBlob or file path
            prompt: Instruction sent after the image
            options: Generation options
            **overrides: Individual option overrides

        Returns:
            GenerationResponse

        Raises:
            GeminiValidationError: Unsupported image input
        """
        inline_data = await self._resolve_image(image)
        opts = resolve_options(options, overrides)
        model = opts.model or self.client.model

        parts = [InlineDataPart(inline_data=inline_data), TextPart(text=prompt)]
        payload = {
            "contents": [{"parts": [part.model_dump() for part in parts]}],
            "generationConfig": opts.generation_config(include_stop_sequences=False),
        }

        logger.debug("Analyzing image: model=%s, mime=%s", model, inline_data.mime_type)
        data = await self.client.request(generate_content_path(model), payload)
        return GenerationResponse.from_raw(data)

    async def _resolve_image(self, image: Any) -> InlineData:
        """Convert any supported image input into inline data."""
        if isinstance(image, str):
            if image.startswith("data:"):
                return _parse_data_uri(image)
            if image.startswith("http"):
                return InlineData(mime_type=DEFAULT_IMAGE_MIME_TYPE, data=image)
            raise GeminiValidationError(
                "Image must be a URL, data URI, bytes, ImageBlob or Path"
            )
        if isinstance(image, (bytes, bytearray, memoryview)):
            return InlineData(mime_type=DEFAULT_IMAGE_MIME_TYPE, data=_encode(bytes(image)))
        if isinstance(image, ImageBlob):
            return InlineData(mime_type=image.mime_type, data=_encode(image.data))
        if isinstance(image, Path):
            return await self._read_path(image)
        raise GeminiValidationError(
            f"Unsupported image type: {type(image).__name__}"
        )

    async def _read_path(self, path: Path) -> InlineData:
        if not path.is_file():
            raise GeminiValidationError(f"Image file not found: {path}")
        data = await asyncio.to_thread(path.read_bytes)
        mime_type, _ = mimetypes.guess_type(path.name)
        return InlineData(mime_type=mime_type or DEFAULT_IMAGE_MIME_TYPE, data=_encode(data))
