"""
Tests for the text and code handlers.
"""

from __future__ import annotations

from typing import Any

import pytest

from geminikit.client import GeminiClient
from geminikit.config.errors import GeminiValidationError

from .models import CodeResponse, GenerationOptions, GenerationResponse, Prompt, TextPart


# --- Text Handler Tests ---


async def test_generate_basic(client: GeminiClient, service: Any) -> None:
    """Test basic text generation payload and response."""
    service.reply_text("Hello", " world")

    response = await client.text.generate("Say hello")

    assert isinstance(response, GenerationResponse)
    assert response.text == "Hello world"
    assert service.requests[0].url.path.endswith("models/gemini-1.5-pro:generateContent")
    assert service.body() == {
        "contents": [{"parts": [{"text": "Say hello"}]}],
        "generationConfig": {
            "temperature": 0.7,
            "topK": 40,
            "topP": 0.95,
            "maxOutputTokens": 1024,
            "stopSequences": [],
        },
        "safetySettings": [],
    }


async def test_generate_with_overrides(client: GeminiClient, service: Any) -> None:
    """Test keyword overrides reach the payload."""
    safety = [{"category": "HARM_CATEGORY_HATE_SPEECH", "threshold": "BLOCK_NONE"}]
    service.reply_text("ok")

    await client.text.generate(
        "Write a poem",
        temperature=0.8,
        max_output_tokens=256,
        stop_sequences=["END"],
        safety_settings=safety,
        model="gemini-1.5-flash",
    )

    body = service.body()
    assert body["generationConfig"]["temperature"] == 0.8
    assert body["generationConfig"]["maxOutputTokens"] == 256
    assert body["generationConfig"]["stopSequences"] == ["END"]
    assert body["safetySettings"] == safety
    assert "gemini-1.5-flash:generateContent" in service.requests[0].url.path


async def test_generate_options_object_and_override(
    client: GeminiClient, service: Any
) -> None:
    """Test keyword overrides take precedence over the options object."""
    options = GenerationOptions(temperature=0.1, top_k=5)

    await client.text.generate("x", options, temperature=0.9)

    config = service.body()["generationConfig"]
    assert config["temperature"] == 0.9
    assert config["topK"] == 5


async def test_generate_structured_prompt(client: GeminiClient, service: Any) -> None:
    """Test Prompt objects and mappings are resolved into parts."""
    await client.text.generate(Prompt(parts=[TextPart(text="a"), TextPart(text="b")]))
    assert service.body()["contents"][0]["parts"] == [{"text": "a"}, {"text": "b"}]

    await client.text.generate({"text": "from mapping"})
    assert service.body()["contents"][0]["parts"] == [{"text": "from mapping"}]

    await client.text.generate({})
    assert service.body()["contents"][0]["parts"] == [{"text": ""}]


async def test_generate_uses_client_default_model(
    client: GeminiClient, service: Any
) -> None:
    client.set_model("gemini-2.0-flash")

    await client.text.generate("hi")

    assert "gemini-2.0-flash:generateContent" in service.requests[0].url.path


async def test_generate_camel_case_inline_data(client: GeminiClient, service: Any) -> None:
    """Test parts in the service's camelCase shape are accepted."""
    await client.text.generate(
        {
            "parts": [
                {"inlineData": {"mimeType": "image/png", "data": "AAAA"}},
                {"text": "hi"},
            ]
        }
    )

    assert service.body()["contents"][0]["parts"] == [
        {"inline_data": {"mime_type": "image/png", "data": "AAAA"}},
        {"text": "hi"},
    ]


async def test_generate_null_text_prompt(client: GeminiClient, service: Any) -> None:
    """Test a mapping with text=None falls back to empty text."""
    await client.text.generate({"text": None})

    assert service.body()["contents"][0]["parts"] == [{"text": ""}]


async def test_generate_invalid_prompt_type(client: GeminiClient, service: Any) -> None:
    """Test unsupported prompt types fail before any request."""
    with pytest.raises(GeminiValidationError):
        await client.text.generate(42)  # type: ignore[arg-type]
    assert service.requests == []


async def test_generate_unknown_option(client: GeminiClient, service: Any) -> None:
    with pytest.raises(GeminiValidationError):
        await client.text.generate("hi", max_tokens=10)
    assert service.requests == []


# --- Code Handler Tests ---


async def test_code_generate(client: GeminiClient, service: Any) -> None:
    """Test code generation prompt, low temperature and code field."""
    service.reply_text("def fib(n): ...")

    result = await client.code.generate(
        "calculates the Fibonacci sequence", "python"
    )

    assert isinstance(result, CodeResponse)
    assert result.code == "def fib(n): ..."
    assert result.text == result.code
    body = service.body()
    assert body["contents"][0]["parts"][0]["text"] == (
        "Generate python code that calculates the Fibonacci sequence. "
        "Provide only the code with no explanations."
    )
    assert body["generationConfig"]["temperature"] == 0.2


async def test_code_generate_caller_temperature_wins(
    client: GeminiClient, service: Any
) -> None:
    await client.code.generate("sorts a list", "rust", temperature=0.0)
    assert service.body()["generationConfig"]["temperature"] == 0.0

    await client.code.generate("sorts a list", "rust", GenerationOptions(temperature=0.5))
    assert service.body()["generationConfig"]["temperature"] == 0.5


async def test_code_analyze_and_improve(client: GeminiClient, service: Any) -> None:
    """Test analyze/improve embed the code verbatim and return raw responses."""
    code = "def f(x):\n    return {x: 1}"
    service.reply_text("It builds a dict.").reply_text("Add type hints.")

    analysis = await client.code.analyze(code)
    assert type(analysis) is GenerationResponse
    assert analysis.text == "It builds a dict."
    assert service.body()["contents"][0]["parts"][0]["text"] == (
        f"Analyze this code and explain what it does:\n\n{code}"
    )
    assert service.body()["generationConfig"]["temperature"] == 0.7

    improvement = await client.code.improve(code)
    assert improvement.text == "Add type hints."
    assert service.body()["contents"][0]["parts"][0]["text"] == (
        f"Suggest improvements for this code:\n\n{code}"
    )


async def test_code_generate_keeps_other_options(
    client: GeminiClient, service: Any
) -> None:
    """Test the code temperature default leaves other caller options intact."""
    await client.code.generate(
        "parses JSON", "go", GenerationOptions(top_k=7), max_output_tokens=64
    )

    config = service.body()["generationConfig"]
    assert config["temperature"] == 0.2
    assert config["topK"] == 7
    assert config["maxOutputTokens"] == 64
