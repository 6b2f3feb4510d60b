"""Decode the director's raw text into a PersonaResponseSet (three tiers, never raises)."""

import json
import logging

from consilium.fallbacks import PLACEHOLDER_RESPONSES
from consilium.models import PERSONA_IDS, DecodeResult, DecodeTier, PersonaResponseSet

logger = logging.getLogger(__name__)

_FENCE_MARKERS = ("```json", "```")


def _parse_record(text: str) -> PersonaResponseSet | None:
    """Parse JSON text into a response set. Returns None if it isn't one."""
    try:
        data = json.loads(text)
    except (ValueError, RecursionError):
        return None
    if not isinstance(data, dict):
        return None
    values = {pid: data.get(pid) for pid in PERSONA_IDS}
    if not all(isinstance(v, str) for v in values.values()):
        return None
    return PersonaResponseSet(**values)


def strip_code_fences(text: str) -> str:
    for marker in _FENCE_MARKERS:
        text = text.replace(marker, "")
    return text.strip()


def decode_director_output(raw_text: str) -> DecodeResult:
    """Decode raw backend text.

    Tiers, in order:
        1. Parse the text as-is.
        2. Strip ```json / ``` fences and retry.
        3. Substitute PLACEHOLDER_RESPONSES.
    """
    if not isinstance(raw_text, str):
        logger.warning("Undecodable payload type: %s", type(raw_text).__name__)
        return DecodeResult(DecodeTier.FALLBACK, PLACEHOLDER_RESPONSES)

    record = _parse_record(raw_text)
    if record is not None:
        return DecodeResult(DecodeTier.PARSED, record)

    record = _parse_record(strip_code_fences(raw_text))
    if record is not None:
        logger.debug("Director output decoded after stripping code fences")
        return DecodeResult(DecodeTier.CLEANED, record)

    logger.warning("Director output unparseable, using placeholders: %.200r", raw_text)
    return DecodeResult(DecodeTier.FALLBACK, PLACEHOLDER_RESPONSES)
