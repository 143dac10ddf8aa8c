from __future__ import annotations

import json
import logging
import re

from pydantic import ValidationError

from adventure.agents.base import Agent
from adventure.core.context import RenderedContext
from adventure.models import Effects, ModelReply

logger = logging.getLogger(__name__)

_JSON_BLOCK = re.compile(r"```json[ \t]*\r?\n(.*?)\r?\n[ \t]*```", re.DOTALL)

FALLBACK_NARRATIVE = "Something went wrong. Please try again."
FALLBACK_ACTIONS: tuple[str, ...] = ("try again", "look around", "wait")


class ReplyParseError(RuntimeError):
    pass


def fallback_reply() -> ModelReply:
    return ModelReply(narrative=FALLBACK_NARRATIVE, effects=Effects(), available_actions=list(FALLBACK_ACTIONS))


def extract_json_block(text: str) -> str:
    match = _JSON_BLOCK.search(text)
    if match is None:
        raise ReplyParseError("Response missing structured data block")
    return match.group(1)


def parse_reply_strict(text: str) -> ModelReply:
    """Parse the first ```json fenced block of a model reply.

    Expected object:
        {"narrative": "...", "effects": {...}, "available_actions": ["..."]}

    Raises ReplyParseError when the block is absent, is not JSON, or does not
    match the reply shape.
    """

    block = extract_json_block(text)

    try:
        data = json.loads(block)
    except (json.JSONDecodeError, RecursionError) as e:
        raise ReplyParseError(f"Invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ReplyParseError("Expected a JSON object")

    try:
        return ModelReply.model_validate(data)
    except ValidationError as e:
        raise ReplyParseError(f"Invalid response structure: {e}") from e


def parse_reply(text: str) -> ModelReply:
    """Parse a model reply, substituting the fallback reply on any parse failure."""

    try:
        return parse_reply_strict(text)
    except ReplyParseError as e:
        logger.warning("Error parsing response: %s", e)
        return fallback_reply()


async def narrate_turn_with_agent(*, agent: Agent, ctx: RenderedContext) -> ModelReply:
    """Ask the Game Master agent for the outcome of one player action.

    Malformed replies degrade to the fallback reply; errors from the agent itself propagate.
    """

    action = await agent.propose_action(ctx=ctx)
    return parse_reply(action.content)
