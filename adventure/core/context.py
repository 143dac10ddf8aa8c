from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from adventure.models import Session

GM_ROLE = "Game Master"

GM_RULES: tuple[str, ...] = (
    "Respond in character as a narrative GM",
    "Maintain consistent world state",
    "Signal state changes through structured format",
)


@dataclass(frozen=True, slots=True)
class GameMasterContext:
    """Fixed instructions shared by every turn of a session."""

    system_prompt: str
    rules: tuple[str, ...] = GM_RULES


@dataclass(frozen=True, slots=True)
class RenderedContext:
    """Final two-message exchange passed into the LLM agent."""

    system_prompt: str
    user_message: str

    def as_messages(self) -> list[dict[str, str]]:
        return [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": self.user_message},
        ]


def turn_payload(*, session: Session, player_input: str, rules: tuple[str, ...] = GM_RULES) -> dict[str, Any]:
    """Everything the model sees about the session for one turn."""

    return {
        "system": {"role": GM_ROLE, "rules": list(rules)},
        "world": session.world.model_dump(mode="json"),
        "character": session.character.model_dump(mode="json"),
        "transcript": session.transcript,
        "player_input": player_input,
    }


def compose_context(*, base: GameMasterContext, session: Session, player_input: str) -> RenderedContext:
    payload = turn_payload(session=session, player_input=player_input, rules=base.rules)
    return RenderedContext(
        system_prompt=base.system_prompt.strip(),
        user_message=json.dumps(payload, indent=2),
    )
