from __future__ import annotations

from adventure.models import Session

DEFAULT_TRANSCRIPT_LIMIT = 16384


def bounded_tail(text: str, *, limit: int = DEFAULT_TRANSCRIPT_LIMIT) -> str:
    """Return the last `limit` characters of `text`."""

    if limit < 0:
        raise ValueError("limit must be >= 0")
    if len(text) <= limit:
        return text
    return text[len(text) - limit :]


def format_exchange(*, player_input: str, narrative: str) -> str:
    return f"\nPlayer: {player_input}\nGM: {narrative}\n"


def append_exchange(
    session: Session,
    *,
    player_input: str,
    narrative: str,
    limit: int = DEFAULT_TRANSCRIPT_LIMIT,
) -> str:
    """Append one player/GM exchange and drop the oldest text beyond `limit`."""

    session.transcript = bounded_tail(
        session.transcript + format_exchange(player_input=player_input, narrative=narrative),
        limit=limit,
    )
    return session.transcript
