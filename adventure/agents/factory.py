from __future__ import annotations

from typing import cast

from adventure.agents.ag2_backend import Ag2ChatAgent
from adventure.agents.base import Agent
from adventure.config import AdventureSettings, settings_from_env


def create_default_agent(*, name: str = "game-master", settings: AdventureSettings | None = None) -> Agent:
    """Create the default LLM-backed Game Master.

    Currently uses AG2/autogen and reads model configuration from env unless settings are given.
    """

    return cast(Agent, Ag2ChatAgent(name=name, settings=settings or settings_from_env()))
