"""
Generative-AI providers.

A provider turns a prompt plus a response schema into JSON text. The
analysis gateway only depends on the `AIProvider` protocol, so tests can
substitute a stub.
"""

from typing import Any, Protocol

from google import genai
from google.genai import types

from symptom_checker.core.logging import get_logger

logger = get_logger(__name__)


class AIProvider(Protocol):
    """Opaque, schema-constrained text generator."""

    async def generate_json(self, prompt: str, schema: dict[str, Any]) -> str:
        ...


class GeminiProvider:
    """Google Gemini provider constrained to JSON output."""

    def __init__(self, api_key: str, model_name: str) -> None:
        self.client = genai.Client(api_key=api_key)
        self.model_name = model_name
        logger.info("Gemini provider initialized", extra={"model": model_name})

    async def generate_json(self, prompt: str, schema: dict[str, Any]) -> str:
        """
        Ask Gemini for a JSON document that conforms to `schema`.

        Args:
            prompt: Natural-language instruction.
            schema: Response schema in Gemini's OpenAPI subset.

        Returns:
            Raw response text.
        """
        response = await self.client.aio.models.generate_content(
            model=self.model_name,
            contents=prompt,
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=schema,
            ),
        )
        return response.text
