"""Unit tests for maneuver definitions and their projection."""

from __future__ import annotations

from gurps_maneuvers.domain.enums import DefensePolicy, EffectChangeMode, MovePolicy
from gurps_maneuvers.domain.maneuver import (
    CONDITION_KEY,
    MANEUVER_STATUS_ID,
    MOVE_OVERRIDE_KEY,
    ManeuverDefinition,
    project,
)

BASE = "icons/maneuvers/"


def test_create_fills_defaults():
    definition = ManeuverDefinition.create(
        name="evaluate", label="Evaluate", icon="man-evaluate.png", base_path=BASE
    )
    assert definition.move_policy is MovePolicy.STEP
    assert definition.defense_policy is DefensePolicy.ANY
    assert definition.is_full_turn is False
    assert definition.alt_icon_path is None
    assert definition.icon_path == "icons/maneuvers/man-evaluate.png"


def test_create_resolves_alt_icon_and_string_policies():
    definition = ManeuverDefinition.create(
        name="aoa_double",
        label="AoA (Double)",
        icon="man-aoa-double.png",
        base_path=BASE,
        move="half",
        defense="none",
        alt="man-allout-attack.png",
    )
    assert definition.move_policy is MovePolicy.HALF
    assert definition.defense_policy is DefensePolicy.NONE
    assert definition.alt_icon_path == "icons/maneuvers/man-allout-attack.png"


def test_projection_carries_directives():
    definition = ManeuverDefinition.create(
        name="move", label="Move", icon="man-move.png", base_path=BASE, move=MovePolicy.FULL
    )
    payload = project(definition)

    assert payload.id == MANEUVER_STATUS_ID
    assert payload.label == "Move"
    assert payload.icon == definition.icon_path
    condition, movement = payload.changes
    assert condition.key == CONDITION_KEY
    assert condition.value == "move"
    assert condition.mode is EffectChangeMode.OVERRIDE
    assert condition.priority == 10
    assert movement.key == MOVE_OVERRIDE_KEY
    assert movement.value == "full"
    assert movement.mode is EffectChangeMode.CUSTOM


def test_projection_is_fresh_but_equal():
    definition = ManeuverDefinition.create(
        name="attack", label="Attack", icon="man-attack.png", base_path=BASE
    )
    first = project(definition)
    second = project(definition)
    assert first == second
    assert first is not second


def test_payload_to_dict_shape():
    definition = ManeuverDefinition.create(
        name="aim", label="Aim", icon="man-aim.png", base_path=BASE, fullturn=True
    )
    data = project(definition).to_dict()

    assert data["id"] == "maneuver"
    assert data["flags"]["gurps"] == {
        "name": "aim",
        "move": "step",
        "defense": "any",
        "fullturn": True,
        "icon": "icons/maneuvers/man-aim.png",
        "alt": None,
    }
    assert data["changes"] == [
        {"key": "data.conditions.maneuver", "value": "aim", "mode": 5, "priority": 10},
        {"key": "data.moveoverride", "value": "step", "mode": 0},
    ]
