"""Unit tests for environment-driven settings."""

from pathlib import Path

import pytest

from persona_agents.config import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    ROOT,
    load_settings,
)


def test_defaults_without_env():
    settings = load_settings()

    assert settings.api_key is None
    assert settings.model == DEFAULT_MODEL == "gpt-3.5-turbo"
    assert settings.temperature == DEFAULT_TEMPERATURE == 0.7
    assert settings.max_tokens == DEFAULT_MAX_TOKENS == 1000
    assert settings.prompts_dir == ROOT / "prompts"
    assert settings.log_level == "INFO"


def test_env_overrides(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("OPENAI_MODEL", "gpt-4o-mini")
    monkeypatch.setenv("OPENAI_TEMPERATURE", "0.2")
    monkeypatch.setenv("OPENAI_MAX_TOKENS", "256")
    monkeypatch.setenv("PROMPTS_DIR", str(tmp_path))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.api_key == "sk-test"
    assert settings.model == "gpt-4o-mini"
    assert settings.temperature == 0.2
    assert settings.max_tokens == 256
    assert settings.prompts_dir == tmp_path
    assert settings.log_level == "DEBUG"


def test_invalid_numbers_fall_back_with_warning(monkeypatch, log_messages):
    monkeypatch.setenv("OPENAI_TEMPERATURE", "warm")
    monkeypatch.setenv("OPENAI_MAX_TOKENS", "lots")

    settings = load_settings()

    assert settings.temperature == DEFAULT_TEMPERATURE
    assert settings.max_tokens == DEFAULT_MAX_TOKENS
    assert any("OPENAI_TEMPERATURE" in m for m in log_messages)
    assert any("OPENAI_MAX_TOKENS" in m for m in log_messages)


def test_dotenv_never_overrides_existing_env(monkeypatch, tmp_path: Path):
    import os
    import importlib

    import persona_agents.config as config_module

    if (config_module.ROOT / ".env").is_file():
        pytest.skip("project .env takes precedence over the working directory")

    (tmp_path / ".env").write_text("OPENAI_MODEL=from-dotenv\nOPENAI_MAX_TOKENS=42\n", encoding="utf-8")
    monkeypatch.setenv("OPENAI_MODEL", "from-shell")
    monkeypatch.chdir(tmp_path)
    try:
        importlib.reload(config_module)

        settings = config_module.load_settings()

        assert settings.model == "from-shell"
        assert settings.max_tokens == 42
    finally:
        os.environ.pop("OPENAI_MAX_TOKENS", None)
