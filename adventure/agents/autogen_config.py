from __future__ import annotations

from typing import Any

from autogen import LLMConfig

from adventure.config import AdventureSettings


def llm_config_from_settings(settings: AdventureSettings) -> LLMConfig:
    # Many OpenAI-compatible servers ignore the key but some SDKs require it.
    api_key = settings.api_key or ("ollama" if settings.base_url else None)

    if not api_key:
        raise RuntimeError(
            "Set OPENAI_API_KEY for hosted OpenAI, or set OPENAI_BASE_URL for a local OpenAI-compatible server"
        )

    # AG2 expects a 'config_list' similar to OAI_CONFIG_LIST.
    config: dict[str, Any] = {"model": settings.model, "api_key": api_key}
    if settings.base_url:
        config["base_url"] = settings.base_url

    return LLMConfig(config_list=[config])
