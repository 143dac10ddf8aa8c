from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator

from adventure.core.events import HistoryEvent


DEFAULT_HEALTH = 100


class Location(BaseModel):
    name: str
    description: str

    # Kept duplicate-free; order is insertion order for display.
    features: list[str] = Field(default_factory=list)


class World(BaseModel):
    current_location: Location

    # Reserved: seeded with the starting location, never appended to.
    known_locations: list[str] = Field(default_factory=list)
    active_quests: list[str] = Field(default_factory=list)


class CharacterStats(BaseModel):
    health: int = DEFAULT_HEALTH
    inventory: list[str] = Field(default_factory=list)


class Character(BaseModel):
    stats: CharacterStats = Field(default_factory=CharacterStats)
    history: list[HistoryEvent] = Field(default_factory=list)


class SessionPhase(StrEnum):
    active = "active"
    game_over = "game_over"
    exited = "exited"


class TurnStatus(StrEnum):
    CONTINUE = "CONTINUE"
    GAME_OVER = "GAME_OVER"


class Session(BaseModel):
    genre: str
    world: World
    character: Character = Field(default_factory=Character)

    # Trailing window of the narrative exchange; see turn_processing.transcript.
    transcript: str = ""

    phase: SessionPhase = SessionPhase.active


class InventoryChanges(BaseModel):
    add: list[str] | None = None
    remove: list[str] | None = None


class Effects(BaseModel):
    """State delta carried by a model reply.

    Every field is optional; `None` means "not present" and is skipped by the
    state manager.
    """

    health_change: int | None = None
    discovered_features: list[str] | None = None
    knowledge_gained: list[str] | None = None
    inventory_changes: InventoryChanges | None = None


class ModelReply(BaseModel):
    narrative: str = Field(..., min_length=1)
    effects: Effects
    available_actions: list[str] = Field(default_factory=list)

    @field_validator("available_actions", mode="before")
    @classmethod
    def _null_actions(cls, v: object) -> object:
        return [] if v is None else v


def new_session(*, genre: str, starting_location: Location) -> Session:
    """Create a fresh session from a genre's starting location template.

    The template is deep-copied so play never mutates the registry.
    """

    location = starting_location.model_copy(deep=True)
    world = World(current_location=location, known_locations=[location.name])
    return Session(genre=genre, world=world)
