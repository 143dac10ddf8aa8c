from __future__ import annotations

import logging
from collections.abc import Iterable

from adventure.core.events import HistoryEvent
from adventure.models import Effects, Session, TurnStatus

logger = logging.getLogger(__name__)


def merge_unique(existing: Iterable[str], added: Iterable[str]) -> list[str]:
    """Union two sequences keeping the first occurrence of each item.

    Existing items come first, then new ones in the order given.
    """

    return list(dict.fromkeys([*existing, *added]))


def apply_delta(session: Session, delta: Effects) -> TurnStatus:
    """Apply one model delta to the session in place.

    Order matters: a health change that drops health to zero or below returns
    GAME_OVER right away and the rest of the delta is not applied.

    The delta is assumed to be validated by the reply parser already.
    """

    stats = session.character.stats

    if delta.health_change is not None:
        stats.health += delta.health_change
        if stats.health <= 0:
            logger.debug("Health reached %s; skipping remaining effects", stats.health)
            return TurnStatus.GAME_OVER

    if delta.discovered_features:
        location = session.world.current_location
        location.features = merge_unique(location.features, delta.discovered_features)

    if delta.knowledge_gained:
        for text in delta.knowledge_gained:
            session.character.history.append(HistoryEvent.discovery(text=text))

    changes = delta.inventory_changes
    if changes is not None:
        if changes.add is not None:
            stats.inventory = merge_unique(stats.inventory, changes.add)
        if changes.remove is not None:
            dropped = set(changes.remove)
            stats.inventory = [item for item in stats.inventory if item not in dropped]

    logger.debug("Applied delta: %s", delta.model_dump(exclude_none=True))
    return TurnStatus.CONTINUE
