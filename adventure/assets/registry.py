from __future__ import annotations

import csv
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from adventure.models import Location

FEATURE_SEPARATOR = "|"


def _norm_key(s: str) -> str:
    return re.sub(r"\s+", " ", s).strip().casefold()


@dataclass(frozen=True, slots=True)
class Genre:
    id: str
    starting_location: Location


@dataclass(frozen=True, slots=True)
class GenreRegistry:
    """Immutable mapping of genre id -> starting location template.

    IDs are canonical; lookups are forgiving about case and whitespace.
    """

    by_id: Mapping[str, Genre]
    _key_to_id: Mapping[str, str]

    @staticmethod
    def from_rows(rows: list[Genre]) -> "GenreRegistry":
        by_id: dict[str, Genre] = {}
        key_to_id: dict[str, str] = {}
        for g in rows:
            if g.id in by_id:
                raise AssetLoadError(f"Duplicate genre id: {g.id}")
            by_id[g.id] = g
            key_to_id[_norm_key(g.id)] = g.id
        return GenreRegistry(by_id=MappingProxyType(by_id), _key_to_id=MappingProxyType(key_to_id))

    def get(self, id: str) -> Genre | None:
        canonical = self._key_to_id.get(_norm_key(id))
        return self.by_id.get(canonical) if canonical else None

    def ids(self) -> tuple[str, ...]:
        return tuple(self.by_id.keys())


class AssetLoadError(RuntimeError):
    pass


def _read_csv_rows(path: Path) -> list[list[str]]:
    try:
        with path.open(encoding="utf-8-sig", newline="") as f:
            rows = [[c.strip() for c in row if c is not None] for row in csv.reader(f)]
    except FileNotFoundError as e:
        raise AssetLoadError(f"Asset file not found: {path}") from e

    return [row for row in rows if any(cell.strip() for cell in row)]


def _split_features(cell: str) -> list[str]:
    features = [f.strip() for f in cell.split(FEATURE_SEPARATOR)]
    return list(dict.fromkeys(f for f in features if f))


def load_genre_csv(path: Path) -> GenreRegistry:
    rows = _read_csv_rows(path)
    if not rows:
        raise AssetLoadError(f"Empty genre CSV: {path}")

    header = [c.casefold() for c in rows[0]]
    if header[:4] != ["id", "name", "description", "features"]:
        raise AssetLoadError(f"Unexpected header in {path}: {rows[0]}")

    out: list[Genre] = []
    for row in rows[1:]:
        if len(row) < 3:
            continue
        gid, name, description = row[0].strip(), row[1].strip(), row[2].strip()
        if not gid or not name:
            continue
        features = _split_features(row[3]) if len(row) > 3 else []
        out.append(Genre(id=gid, starting_location=Location(name=name, description=description, features=features)))

    if not out:
        raise AssetLoadError(f"No genres defined in {path}")
    return GenreRegistry.from_rows(out)


def _fallback_genres() -> GenreRegistry:
    """Built-in genres used when `adventure/assets/genres.csv` is missing."""

    return GenreRegistry.from_rows(
        [
            Genre(
                id="fantasy",
                starting_location=Location(
                    name="Ruined Wizard's Tower",
                    description="An ancient stone structure with crumbling upper levels.",
                    features=["weathered wooden door", "ivy-covered walls"],
                ),
            ),
            Genre(
                id="scifi",
                starting_location=Location(
                    name="Orbital Station Spaceport",
                    description="A bustling terminal filled with travelers from across the galaxy.",
                    features=["security checkpoints", "large viewing windows"],
                ),
            ),
        ]
    )


def load_genres(*, root: Path) -> GenreRegistry:
    # Default behavior: fall back to the built-in genres when the CSV is missing.
    # You can force strict behavior by setting ADVENTURE_STRICT_ASSETS=1.
    strict = os.getenv("ADVENTURE_STRICT_ASSETS", "").strip().lower() in {"1", "true", "yes"}

    try:
        return load_genre_csv(root / "assets" / "genres.csv")
    except AssetLoadError:
        if strict:
            raise
        return _fallback_genres()
