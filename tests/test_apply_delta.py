from __future__ import annotations

from datetime import datetime, timezone

from adventure.models import Effects, InventoryChanges, Session, TurnStatus
from adventure.turn_processing.effects import apply_delta, merge_unique


def test_merge_unique_keeps_first_occurrence_in_order() -> None:
    assert merge_unique(["a", "b"], ["b", "c", "a", "c", "d"]) == ["a", "b", "c", "d"]


def test_inventory_add_dedupes_within_and_across_deltas(session: Session) -> None:
    delta = Effects(inventory_changes=InventoryChanges(add=["torch", "torch", "rope"]))

    assert apply_delta(session, delta) == TurnStatus.CONTINUE
    assert session.character.stats.inventory == ["torch", "rope"]

    apply_delta(session, delta)
    apply_delta(session, Effects(inventory_changes=InventoryChanges(add=["rope", "lantern"])))
    assert session.character.stats.inventory == ["torch", "rope", "lantern"]


def test_discovered_features_union_into_current_location(session: Session) -> None:
    delta = Effects(discovered_features=["hidden lever", "ivy-covered walls", "hidden lever"])

    apply_delta(session, delta)
    apply_delta(session, delta)

    assert session.world.current_location.features == [
        "weathered wooden door",
        "ivy-covered walls",
        "hidden lever",
    ]


def test_remove_of_missing_item_is_a_noop(session: Session) -> None:
    apply_delta(session, Effects(inventory_changes=InventoryChanges(add=["torch"])))

    status = apply_delta(session, Effects(inventory_changes=InventoryChanges(remove=["sword"])))

    assert status == TurnStatus.CONTINUE
    assert session.character.stats.inventory == ["torch"]


def test_add_then_remove_in_same_delta(session: Session) -> None:
    delta = Effects(inventory_changes=InventoryChanges(add=["key", "coin"], remove=["key"]))

    apply_delta(session, delta)

    assert session.character.stats.inventory == ["coin"]


def test_knowledge_gained_appends_timestamped_discoveries(session: Session) -> None:
    before = datetime.now(timezone.utc)

    apply_delta(session, Effects(knowledge_gained=["The tower is haunted", "The door is warded"]))

    history = session.character.history
    assert [e.text for e in history] == ["The tower is haunted", "The door is warded"]
    assert all(e.kind == "discovery" for e in history)
    assert all(e.timestamp >= before for e in history)


def test_empty_lists_change_nothing(session: Session) -> None:
    snapshot = session.model_dump()

    status = apply_delta(session, Effects(discovered_features=[], knowledge_gained=[]))

    assert status == TurnStatus.CONTINUE
    assert session.model_dump() == snapshot


def test_lethal_health_change_short_circuits_remaining_effects(session: Session) -> None:
    for k in (0, 1, 50):
        s = session.model_copy(deep=True)
        health = s.character.stats.health
        delta = Effects(
            health_change=-health - k,
            discovered_features=["secret passage"],
            knowledge_gained=["too late"],
            inventory_changes=InventoryChanges(add=["amulet"]),
        )

        assert apply_delta(s, delta) == TurnStatus.GAME_OVER
        assert s.character.stats.health == -k
        assert "secret passage" not in s.world.current_location.features
        assert s.character.history == []
        assert s.character.stats.inventory == []


def test_healing_and_damage_accumulate(session: Session) -> None:
    assert apply_delta(session, Effects(health_change=-30)) == TurnStatus.CONTINUE
    assert session.character.stats.health == 70

    assert apply_delta(session, Effects(health_change=10)) == TurnStatus.CONTINUE
    assert session.character.stats.health == 80

    assert apply_delta(session, Effects(health_change=-80)) == TurnStatus.GAME_OVER
    assert session.character.stats.health == 0
