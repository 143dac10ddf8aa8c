from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from dotenv import load_dotenv

from adventure.agents.base import Agent
from adventure.agents.factory import create_default_agent
from adventure.assets.singleton import get_genres, init_genres
from adventure.config import AdventureSettings, settings_from_env
from adventure.contexts import make_game_master_context
from adventure.game_loop import run_session
from adventure.models import new_session
from adventure.prompts import PromptLoadError

logger = logging.getLogger(__name__)

DEFAULT_GENRE = "fantasy"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="adventure",
        description="Single-player text adventure narrated by a language model.",
    )
    parser.add_argument("genre", nargs="?", default=DEFAULT_GENRE, help="starting genre (default: %(default)s)")
    return parser


def configure_logging(settings: AdventureSettings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(
    argv: Sequence[str] | None = None,
    *,
    agent: Agent | None = None,
    settings: AdventureSettings | None = None,
) -> int:
    args = build_parser().parse_args(argv)

    if settings is None:
        load_dotenv(override=False)
        settings = settings_from_env()
    configure_logging(settings)

    init_genres()
    genres = get_genres()
    genre = genres.get(args.genre)
    if genre is None:
        print(f"Unknown genre: {args.genre}", file=sys.stderr)
        print(f"Available genres: {', '.join(genres.ids())}", file=sys.stderr)
        return 1

    try:
        base = make_game_master_context()
    except PromptLoadError as e:
        print(f"Cannot start game: {e}", file=sys.stderr)
        return 1

    print(f"Starting new game in {genre.id} setting...\n")

    session = new_session(genre=genre.id, starting_location=genre.starting_location)
    phase = asyncio.run(
        run_session(
            session=session,
            agent=agent or create_default_agent(settings=settings),
            base=base,
            transcript_limit=settings.transcript_limit,
        )
    )
    logger.debug("Session ended in phase %s", phase.value)

    print("\nThanks for playing!")
    return 0
