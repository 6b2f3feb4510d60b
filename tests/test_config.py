"""Tests for config/config_loader.py."""

from pathlib import Path

import pytest
import yaml

from config.config_loader import AppConfig, ModelConfig, load_config


@pytest.fixture
def minimal_settings(tmp_path: Path) -> Path:
    """Write a minimal valid settings.yaml to a temp path."""
    settings = {
        "model": {
            "name": "gemini",
            "model": "gemini-2.5-flash",
            "api_key_envs": ["MY_KEY", "MY_OTHER_KEY"],
            "temperature": 0.7,
        },
        "session": {
            "locked_delay_sec": 0.5,
            "consensus_delay_sec": 2,
            "output_dir": "./out",
        },
        "prompts": {
            "director": "Q: {query}",
        },
    }
    path = tmp_path / "settings.yaml"
    path.write_text(yaml.dump(settings), encoding="utf-8")
    return path


def test_load_config_returns_app_config(minimal_settings):
    config = load_config(minimal_settings)
    assert isinstance(config, AppConfig)
    assert isinstance(config.model, ModelConfig)


def test_load_config_model(minimal_settings):
    config = load_config(minimal_settings)
    assert config.model.model == "gemini-2.5-flash"
    assert config.model.api_key_envs == ["MY_KEY", "MY_OTHER_KEY"]
    assert config.model.temperature == 0.7
    assert config.model.response_mime_type == "application/json"


def test_load_config_session(minimal_settings):
    config = load_config(minimal_settings)
    assert config.session.locked_delay_sec == 0.5
    assert config.session.consensus_delay_sec == 2.0
    assert isinstance(config.session.output_dir, Path)


def test_load_config_prompt_template(minimal_settings):
    config = load_config(minimal_settings)
    assert config.prompts.director == "Q: {query}"


def test_load_config_defaults_when_sections_missing(tmp_path: Path):
    path = tmp_path / "settings.yaml"
    path.write_text(yaml.dump({"model": {"model": "gemini-x"}}), encoding="utf-8")
    config = load_config(path)
    assert config.model.name == "gemini"
    assert config.model.api_key_envs == ["GEMINI_API_KEY", "GOOGLE_API_KEY"]
    assert config.model.temperature == 0.9
    assert config.session.locked_delay_sec == 1.5
    assert config.session.consensus_delay_sec == 1.5
    assert config.prompts.director is None


def test_load_config_missing_file():
    with pytest.raises(FileNotFoundError):
        load_config(Path("/nonexistent/settings.yaml"))


def test_bundled_settings_load():
    config = load_config()
    assert config.model.name == "gemini"
    assert "{query}" in config.prompts.director
    rendered = config.prompts.director.format(query="hello")
    assert '{"gemini": "...", "claude": "...", "gpt": "...", "grok": "..."}' in rendered
