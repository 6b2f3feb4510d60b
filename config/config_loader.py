"""Load settings.yaml into typed dataclasses."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

_SETTINGS_PATH = Path(__file__).parent / "settings.yaml"

_DEFAULT_KEY_ENVS = ["GEMINI_API_KEY", "GOOGLE_API_KEY"]


@dataclass
class ModelConfig:
    name: str
    model: str
    api_key_envs: list[str] = field(default_factory=lambda: list(_DEFAULT_KEY_ENVS))
    temperature: float = 0.9
    response_mime_type: str = "application/json"


@dataclass
class SessionConfig:
    locked_delay_sec: float = 1.5
    consensus_delay_sec: float = 1.5
    output_dir: Path = Path("./reports")


@dataclass
class PromptsConfig:
    director: str | None = None  # None -> built-in template


@dataclass
class AppConfig:
    model: ModelConfig
    session: SessionConfig
    prompts: PromptsConfig


def load_config(settings_path: Path = _SETTINGS_PATH) -> AppConfig:
    """Load configuration from settings.yaml.

    Raises FileNotFoundError if settings file missing. The ``model`` section
    is required; ``session`` and ``prompts`` fall back to defaults.
    """
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    with settings_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    model_raw = raw["model"]
    model = ModelConfig(
        name=str(model_raw.get("name", "gemini")),
        model=str(model_raw["model"]),
        api_key_envs=[str(v) for v in model_raw.get("api_key_envs", _DEFAULT_KEY_ENVS)],
        temperature=float(model_raw.get("temperature", 0.9)),
        response_mime_type=str(model_raw.get("response_mime_type", "application/json")),
    )

    session_raw = raw.get("session") or {}
    session = SessionConfig(
        locked_delay_sec=float(session_raw.get("locked_delay_sec", 1.5)),
        consensus_delay_sec=float(session_raw.get("consensus_delay_sec", 1.5)),
        output_dir=Path(session_raw.get("output_dir", "./reports")),
    )

    prompts_raw = raw.get("prompts") or {}
    prompts = PromptsConfig(director=prompts_raw.get("director"))

    logger.debug("Loaded settings from %s (model=%s)", settings_path, model.model)

    return AppConfig(model=model, session=session, prompts=prompts)
