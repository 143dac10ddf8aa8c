from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from adventure.turn_processing.transcript import DEFAULT_TRANSCRIPT_LIMIT

DEFAULT_MODEL = "dolphin3:8b"
# Local Ollama exposes an OpenAI-compatible API here.
DEFAULT_BASE_URL = "http://127.0.0.1:11434/v1"
DEFAULT_LOG_LEVEL = "WARNING"


def package_root() -> Path:
    # adventure/config.py -> adventure/; prompt and genre files ship inside the package.
    return Path(__file__).resolve().parent


@dataclass(frozen=True, slots=True)
class AdventureSettings:
    model: str = DEFAULT_MODEL
    base_url: str | None = DEFAULT_BASE_URL
    api_key: str | None = None
    transcript_limit: int = DEFAULT_TRANSCRIPT_LIMIT
    log_level: str = DEFAULT_LOG_LEVEL


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from e
    if value < 0:
        raise RuntimeError(f"{name} must be >= 0, got {value}")
    return value


def settings_from_env(*, default_model: str = DEFAULT_MODEL) -> AdventureSettings:
    """Read settings from the process environment.

    Set OPENAI_BASE_URL to an empty string to talk to hosted OpenAI instead of Ollama.
    """

    return AdventureSettings(
        model=os.environ.get("OPENAI_MODEL", default_model),
        base_url=os.environ.get("OPENAI_BASE_URL", DEFAULT_BASE_URL) or None,
        api_key=os.environ.get("OPENAI_API_KEY") or None,
        transcript_limit=_int_from_env("ADVENTURE_TRANSCRIPT_LIMIT", DEFAULT_TRANSCRIPT_LIMIT),
        log_level=os.environ.get("ADVENTURE_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL,
    )
