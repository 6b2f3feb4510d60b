"""Director call: one backend request, mapped to a response set. Never raises."""

import asyncio
import logging
from collections.abc import Callable

from config.config_loader import ModelConfig
from consilium.credentials import has_api_key
from consilium.decoder import decode_director_output
from consilium.fallbacks import CONNECTION_FAILED_RESPONSES, LOCKED_RESPONSES, PLACEHOLDER_RESPONSES
from consilium.models import DecodeResult, DecodeTier, FetchOutcome, FetchResult
from consilium.providers.base import AIProvider, ProviderError
from consilium.providers.gemini import GeminiProvider

logger = logging.getLogger(__name__)

LOCKED_DELAY_SEC = 1.5

ProviderFactory = Callable[[ModelConfig, str], AIProvider]


async def fetch_responses(
    prompt: str,
    api_key: str | None,
    config: ModelConfig,
    *,
    locked_delay_sec: float = LOCKED_DELAY_SEC,
    provider_factory: ProviderFactory = GeminiProvider,
) -> FetchResult:
    """Run the director prompt against the backend.

    Args:
        prompt: Director prompt from build_director_prompt.
        api_key: Resolved credential, or None when not configured.
        config: Backend model settings.
        locked_delay_sec: Pause before returning the locked set, so the
            no-key path feels like a real call.
        provider_factory: Builds the provider from (config, api_key).

    Returns:
        FetchResult whose responses always hold all four personas.
    """
    if not has_api_key(api_key):
        logger.error("API key missing: set one of %s", ", ".join(config.api_key_envs))
        await asyncio.sleep(locked_delay_sec)
        return FetchResult(FetchOutcome.LOCKED, LOCKED_RESPONSES)

    try:
        provider = provider_factory(config, api_key)
        raw_text = await provider.generate(prompt)
    except ProviderError as exc:
        logger.error("Director call failed (status=%s): %s", exc.status_code, exc)
        return FetchResult(FetchOutcome.FAILED, CONNECTION_FAILED_RESPONSES)
    except Exception:
        logger.exception("Unexpected error during director call")
        return FetchResult(FetchOutcome.FAILED, CONNECTION_FAILED_RESPONSES)

    if not raw_text:
        logger.error("Director call returned an empty payload")
        return FetchResult(FetchOutcome.FAILED, CONNECTION_FAILED_RESPONSES)

    try:
        decoded = decode_director_output(raw_text)
    except Exception:
        logger.exception("Unexpected error while decoding director output")
        decoded = DecodeResult(DecodeTier.FALLBACK, PLACEHOLDER_RESPONSES)
    logger.info("Director output decoded (tier=%s)", decoded.tier.value)
    return FetchResult(FetchOutcome.DECODED, decoded.responses, decode=decoded)
