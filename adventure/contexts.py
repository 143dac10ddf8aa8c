from __future__ import annotations

from adventure.core.context import GameMasterContext
from adventure.prompts import GAME_MASTER_PROMPT, load_prompt


def make_game_master_context(*, system_prefix: str = "") -> GameMasterContext:
    """Construct the fixed Game Master context for a session.

    The instructions describing the required reply shape come from prompts/game_master.txt.
    You can optionally prepend extra system-level instructions via system_prefix.
    """

    gm_rules = load_prompt(GAME_MASTER_PROMPT)
    parts: list[str] = []
    if system_prefix.strip():
        parts.append(system_prefix.strip())
    parts.append(gm_rules.strip())

    return GameMasterContext(system_prompt="\n\n".join(parts).strip())
