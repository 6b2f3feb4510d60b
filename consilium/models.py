"""Dataclasses and enums for the Consilium pipeline. No I/O, no deps."""

from dataclasses import asdict, dataclass
from enum import Enum


@dataclass(frozen=True)
class Persona:
    id: str                # lowercase key used in the director output
    name: str              # display name
    provider: str          # provider label shown under the name
    report_label: str      # heading used in the exported report
    color: str = "white"   # rich style for the persona card


PERSONAS: tuple[Persona, ...] = (
    Persona("gemini", "Gemini Ultra 1.5", "GOOGLE DEEPMIND", "GEMINI ULTRA 1.5 (Google DeepMind)", "blue"),
    Persona("claude", "Claude 3.5 Opus", "ANTHROPIC", "CLAUDE 3.5 OPUS (Anthropic)", "dark_orange"),
    Persona("gpt", "GPT-4o", "OPENAI", "GPT-4o (OpenAI)", "grey89"),
    Persona("grok", "Grok 2", "XAI", "GROK 2 (xAI)", "white"),
)

PERSONA_IDS: tuple[str, ...] = tuple(p.id for p in PERSONAS)


@dataclass(frozen=True)
class PersonaResponseSet:
    gemini: str = ""
    claude: str = ""
    gpt: str = ""
    grok: str = ""

    def __getitem__(self, persona_id: str) -> str:
        if persona_id not in PERSONA_IDS:
            raise KeyError(persona_id)
        return getattr(self, persona_id)

    def as_dict(self) -> dict[str, str]:
        return asdict(self)

    def values(self) -> list[str]:
        return [getattr(self, pid) for pid in PERSONA_IDS]

    def is_empty(self) -> bool:
        return not any(self.values())


EMPTY_RESPONSES = PersonaResponseSet()


class SessionState(str, Enum):
    IDLE = "IDLE"
    ANALYZING = "ANALYZING"
    DONE = "DONE"


class ConsensusState(str, Enum):
    AGREEMENT = "AGREEMENT"
    SYSTEM_LOCK = "SYSTEM LOCK"


class DecodeTier(str, Enum):
    PARSED = "parsed"        # raw text decoded directly
    CLEANED = "cleaned"      # decoded after stripping code fences
    FALLBACK = "fallback"    # placeholder set substituted


@dataclass(frozen=True)
class DecodeResult:
    tier: DecodeTier
    responses: PersonaResponseSet


class FetchOutcome(str, Enum):
    LOCKED = "locked"        # no credential, network skipped
    FAILED = "failed"        # transport/backend failure or empty payload
    DECODED = "decoded"      # payload received and passed to the decoder


@dataclass(frozen=True)
class FetchResult:
    outcome: FetchOutcome
    responses: PersonaResponseSet
    decode: DecodeResult | None = None
