"""Shared pytest fixtures."""

import json
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from config.config_loader import AppConfig, ModelConfig, PromptsConfig, SessionConfig
from consilium.models import PersonaResponseSet
from consilium.providers.base import AIProvider

SAMPLE_RECORD = {
    "gemini": "Cross-domain synthesis indicates a structured, multimodal approach.",
    "claude": "I appreciate the question; it deserves a carefully considered answer.",
    "gpt": "Short answer: yes. Here is why, in three clear points.",
    "grok": "Bold move. Like microwaving fish in the office, but with more upside.",
}


@pytest.fixture
def sample_record() -> dict[str, str]:
    return dict(SAMPLE_RECORD)


@pytest.fixture
def sample_responses() -> PersonaResponseSet:
    return PersonaResponseSet(**SAMPLE_RECORD)


@pytest.fixture
def sample_model_config() -> ModelConfig:
    return ModelConfig(
        name="gemini",
        model="gemini-test-model",
        api_key_envs=["TEST_GEMINI_KEY", "TEST_GOOGLE_KEY"],
        temperature=0.9,
        response_mime_type="application/json",
    )


@pytest.fixture
def sample_app_config(sample_model_config: ModelConfig, tmp_path: Path) -> AppConfig:
    return AppConfig(
        model=sample_model_config,
        session=SessionConfig(
            locked_delay_sec=0.0,
            consensus_delay_sec=0.0,
            output_dir=tmp_path / "reports",
        ),
        prompts=PromptsConfig(),
    )


class MockProvider(AIProvider):
    """Test double AIProvider."""

    def __init__(self, provider_name: str = "gemini", payload: str | None = None) -> None:
        self._name = provider_name
        self._payload = payload if payload is not None else json.dumps(SAMPLE_RECORD)
        # Shadow the class method with an AsyncMock at the instance level.
        # ABC check passes because generate is defined in the class body below.
        self.generate = AsyncMock(return_value=self._payload)  # type: ignore[assignment]

    def name(self) -> str:
        return self._name

    def model_string(self) -> str:
        return "mock-model"

    async def generate(self, prompt: str) -> str:  # type: ignore[override]
        """Default implementation; replaced by AsyncMock in __init__."""
        return self._payload

    def factory(self, config: ModelConfig, api_key: str) -> "MockProvider":
        """Drop-in provider_factory that always returns this instance."""
        return self


@pytest.fixture
def mock_provider() -> MockProvider:
    return MockProvider()
