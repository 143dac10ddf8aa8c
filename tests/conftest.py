from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from adventure.agents.base import AgentAction
from adventure.core.context import RenderedContext
from adventure.models import Location, Session, new_session


@pytest.fixture(scope="session", autouse=True)
def _load_dotenv_for_tests() -> None:
    """Load repo .env for local runs.

    This makes OPENAI_BASE_URL / OPENAI_MODEL available to tests without needing
    to manually export them in your shell.

    In CI, we *don't* auto-load `.env` by default, so integration tests that require
    a live Ollama instance stay skipped unless explicitly opted-in.
    """

    # Opt-in locally with: ADVENTURE_LOAD_DOTENV_FOR_TESTS=1
    if os.environ.get("CI") and os.environ.get("ADVENTURE_LOAD_DOTENV_FOR_TESTS") != "1":
        return

    env_path = Path(__file__).resolve().parents[1] / ".env"
    if env_path.exists():
        from dotenv import load_dotenv

        load_dotenv(dotenv_path=env_path, override=False)


@pytest.fixture(scope="session", autouse=True)
def _init_genres_from_test_fixtures() -> None:
    """Initialize genres from `tests/assets` and forbid the built-in fallback.

    This keeps tests hermetic and prevents coupling to the repo's real genre table.
    """

    os.environ["ADVENTURE_STRICT_ASSETS"] = "1"

    from adventure.assets.singleton import init_genres, reset_genres_for_tests

    reset_genres_for_tests()

    # Point the loader at a fake project root: tests/ contains an assets/ dir.
    init_genres(root=Path(__file__).resolve().parent)


def fenced(body: str) -> str:
    return f"The torchlight flickers.\n\n```json\n{body}\n```\n"


@dataclass
class ScriptedAgent:
    """Agent stub returning canned replies in order."""

    replies: list[str]
    name: str = "scripted"
    seen: list[RenderedContext] = field(default_factory=list)

    async def propose_action(self, *, ctx: RenderedContext) -> AgentAction:
        self.seen.append(ctx)
        return AgentAction(kind="chat", content=self.replies.pop(0))


@pytest.fixture()
def session() -> Session:
    start = Location(
        name="Ruined Wizard's Tower",
        description="An ancient stone structure with crumbling upper levels.",
        features=["weathered wooden door", "ivy-covered walls"],
    )
    return new_session(genre="fantasy", starting_location=start)
