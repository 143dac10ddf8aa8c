from __future__ import annotations

import pytest

from adventure.agents.autogen_config import llm_config_from_settings
from adventure.config import DEFAULT_BASE_URL, DEFAULT_MODEL, AdventureSettings, settings_from_env


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("OPENAI_MODEL", "OPENAI_BASE_URL", "OPENAI_API_KEY", "ADVENTURE_TRANSCRIPT_LIMIT", "ADVENTURE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    s = settings_from_env()

    assert s.model == DEFAULT_MODEL
    assert s.base_url == DEFAULT_BASE_URL
    assert s.api_key is None
    assert s.transcript_limit == 16384
    assert s.log_level == "WARNING"


def test_settings_from_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENAI_MODEL", "llama3")
    monkeypatch.setenv("OPENAI_BASE_URL", "")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("ADVENTURE_TRANSCRIPT_LIMIT", "2048")
    monkeypatch.setenv("ADVENTURE_LOG_LEVEL", "debug")

    s = settings_from_env()

    assert s == AdventureSettings(model="llama3", base_url=None, api_key="sk-test", transcript_limit=2048, log_level="DEBUG")


def test_bad_transcript_limit(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ADVENTURE_TRANSCRIPT_LIMIT", "lots")
    with pytest.raises(RuntimeError):
        settings_from_env()


def test_llm_config_requires_key_without_base_url() -> None:
    with pytest.raises(RuntimeError):
        llm_config_from_settings(AdventureSettings(base_url=None, api_key=None))
