"""Gemini provider using google-genai SDK with native async."""

import logging
import time

from google import genai
from google.genai import errors as genai_errors
from google.genai import types as genai_types

from config.config_loader import ModelConfig
from consilium.providers.base import AIProvider, ProviderError

logger = logging.getLogger(__name__)


def extract_text(response: genai_types.GenerateContentResponse) -> str | None:
    """Return candidates[0].content.parts[0].text, or None if any link is missing."""
    candidates = response.candidates or []
    if not candidates or candidates[0].content is None:
        return None
    parts = candidates[0].content.parts or []
    if not parts:
        return None
    return parts[0].text or None


class GeminiProvider(AIProvider):
    """Google Gemini provider via google-genai SDK.

    The key is bound to this client instance only; it is never logged or
    placed in the prompt.
    """

    def __init__(self, config: ModelConfig, api_key: str, client: genai.Client | None = None) -> None:
        self._config = config
        if not api_key or not api_key.strip():
            raise ProviderError(config.name, "Missing API key")
        self._client = client or genai.Client(api_key=api_key.strip())

    def name(self) -> str:
        return self._config.name

    def model_string(self) -> str:
        return self._config.model

    async def generate(self, prompt: str) -> str:
        start = time.monotonic()
        try:
            response = await self._client.aio.models.generate_content(
                model=self._config.model,
                contents=prompt,
                config=genai_types.GenerateContentConfig(
                    response_mime_type=self._config.response_mime_type,
                    temperature=self._config.temperature,
                ),
            )
        except genai_errors.APIError as exc:
            raise ProviderError(
                self._config.name,
                f"API Connection Failed: {exc.code} {exc.status or ''} {exc.details or exc.message or ''}".strip(),
                status_code=exc.code,
            ) from exc
        except Exception as exc:
            raise ProviderError(self._config.name, f"API call failed: {exc}") from exc

        latency = time.monotonic() - start

        text = extract_text(response)
        if not text:
            raise ProviderError(self._config.name, "Empty response from API")

        token_count: int | None = None
        if response.usage_metadata:
            token_count = response.usage_metadata.total_token_count

        logger.info("Gemini director call: %.2fs, %s tokens", latency, token_count)
        return text
