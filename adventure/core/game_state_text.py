from __future__ import annotations

from adventure.models import Session

RECENT_DISCOVERIES = 3


def _section(title: str) -> str:
    return f"\n=== {title} ==="


def session_status_text(*, session: Session, recent: int = RECENT_DISCOVERIES) -> str:
    """Deterministic multi-line status block for the `.status` command.

    Sections: character health, location, inventory, the most recent
    discoveries and active quests. Empty discoveries/quests are omitted.
    """

    stats = session.character.stats
    location = session.world.current_location

    lines: list[str] = [_section("Character Status"), f"Health: {stats.health}"]

    lines.append(_section("Location"))
    lines.append(f"Current Location: {location.name}")
    lines.append(f"Description: {location.description}")
    lines.append(f"\nFeatures: {', '.join(location.features)}")

    lines.append(_section("Inventory"))
    lines.append(", ".join(stats.inventory) if stats.inventory else "Empty")

    history = session.character.history
    if history and recent > 0:
        lines.append(_section("Recent Discoveries"))
        lines.extend(f"- {event.text}" for event in history[-recent:])

    if session.world.active_quests:
        lines.append(_section("Active Quests"))
        lines.extend(session.world.active_quests)

    lines.append("\n===================\n")
    return "\n".join(lines)
