"""Classify a completed response set as AGREEMENT or SYSTEM_LOCK."""

from consilium.fallbacks import LOCKED_MARKER
from consilium.models import ConsensusState, PersonaResponseSet


def evaluate_consensus(responses: PersonaResponseSet) -> ConsensusState:
    """AGREEMENT when all four responses are non-empty and none is locked."""
    all_responded = all(r and LOCKED_MARKER not in r for r in responses.values())
    return ConsensusState.AGREEMENT if all_responded else ConsensusState.SYSTEM_LOCK
