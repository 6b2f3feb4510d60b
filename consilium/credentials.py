"""Resolve the backend API key from the environment. Absence is not an error."""

import logging
import os
from collections.abc import Iterable

logger = logging.getLogger(__name__)


def resolve_api_key(env_names: Iterable[str]) -> str | None:
    """Return the first non-empty value among ``env_names``, or None.

    Values are stripped; a whitespace-only value counts as absent.
    """
    names = list(env_names)
    for name in names:
        value = os.environ.get(name, "").strip()
        if value:
            logger.debug("API key resolved from %s", name)
            return value

    logger.info("No API key found — set one of %s in .env", ", ".join(names))
    return None


def has_api_key(api_key: str | None) -> bool:
    """True when the key is set and not whitespace-only."""
    return api_key is not None and bool(api_key.strip())
