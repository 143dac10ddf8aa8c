from __future__ import annotations

from pathlib import Path

from adventure.assets.registry import GenreRegistry, load_genres
from adventure.config import package_root


_GENRES: GenreRegistry | None = None


def init_genres(*, root: Path | None = None) -> GenreRegistry:
    """Load the genre registry once and cache it.

    Safe to call multiple times; subsequent calls return the already loaded instance.
    """

    global _GENRES
    if _GENRES is None:
        _GENRES = load_genres(root=root or package_root())
    return _GENRES


def reset_genres_for_tests() -> None:
    """Reset the cached registry so tests can load from fixture directories."""

    global _GENRES
    _GENRES = None


def get_genres() -> GenreRegistry:
    if _GENRES is None:
        raise RuntimeError("Genres not initialized. Call init_genres() at startup.")
    return _GENRES
