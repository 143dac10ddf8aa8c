from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from adventure.agents.base import Agent
from adventure.agents.game_master import narrate_turn_with_agent
from adventure.core.context import GameMasterContext, compose_context
from adventure.core.game_state_text import session_status_text
from adventure.fsm import SessionFSM
from adventure.models import ModelReply, Session, SessionPhase, TurnStatus
from adventure.turn_processing.effects import apply_delta
from adventure.turn_processing.transcript import DEFAULT_TRANSCRIPT_LIMIT, append_exchange

logger = logging.getLogger(__name__)

INPUT_PROMPT = '\nWhat would you like to do? (type ".status" for character info, ".exit" or ".quit" to end): '
GAME_OVER_MESSAGE = "\nGame Over! Your health has reached 0."


class Command(StrEnum):
    action = "action"
    status = "status"
    exit = "exit"
    blank = "blank"


def classify_input(raw: str) -> Command:
    text = raw.strip()
    if not text:
        return Command.blank
    lowered = text.casefold()
    if lowered in {".exit", ".quit"}:
        return Command.exit
    if lowered == ".status":
        return Command.status
    return Command.action


@dataclass(frozen=True, slots=True)
class TurnResult:
    """Outcome of one processed turn.

    `reply` is None when the turn failed before a reply was available; the
    session is then left untouched.
    """

    status: TurnStatus
    reply: ModelReply | None


async def run_turn(
    *,
    session: Session,
    fsm: SessionFSM,
    agent: Agent,
    base: GameMasterContext,
    player_input: str,
    transcript_limit: int = DEFAULT_TRANSCRIPT_LIMIT,
) -> TurnResult:
    """Process one player action: model call, delta application, transcript update.

    Any error from the model collaborator is logged and the turn is skipped.
    """

    fsm.require_active()

    try:
        ctx = compose_context(base=base, session=session, player_input=player_input)
        reply = await narrate_turn_with_agent(agent=agent, ctx=ctx)
    except Exception:
        logger.exception("Error processing input: %r", player_input)
        return TurnResult(status=TurnStatus.CONTINUE, reply=None)

    status = apply_delta(session, reply.effects)
    append_exchange(session, player_input=player_input, narrative=reply.narrative, limit=transcript_limit)
    fsm.record_turn(status)
    return TurnResult(status=status, reply=reply)


def format_reply(reply: ModelReply) -> str:
    text = f"\n{reply.narrative}\n"
    if reply.available_actions:
        text += f"\nAvailable actions: {', '.join(reply.available_actions)}\n"
    return text


async def run_session(
    *,
    session: Session,
    agent: Agent,
    base: GameMasterContext,
    transcript_limit: int = DEFAULT_TRANSCRIPT_LIMIT,
    read_input: Callable[[str], str] | None = None,
    write: Callable[[str], None] | None = None,
) -> SessionPhase:
    """Run turns until the player exits or health runs out.

    End of input (EOF / Ctrl-C at the prompt) counts as an exit.
    Returns the terminal phase.
    """

    read = read_input or input
    emit = write or print
    fsm = SessionFSM(session)

    while fsm.in_play:
        try:
            raw = read(INPUT_PROMPT)
        except (EOFError, KeyboardInterrupt):
            fsm.exit_requested()
            break

        command = classify_input(raw)
        if command == Command.exit:
            fsm.exit_requested()
            break
        if command == Command.status:
            emit(session_status_text(session=session))
            continue
        if command == Command.blank:
            continue

        result = await run_turn(
            session=session,
            fsm=fsm,
            agent=agent,
            base=base,
            player_input=raw.strip(),
            transcript_limit=transcript_limit,
        )
        if result.reply is not None:
            emit(format_reply(result.reply))
        if result.status == TurnStatus.GAME_OVER:
            emit(GAME_OVER_MESSAGE)

    return session.phase
