"""Enumerations used by the maneuver rules layer."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class MovePolicy(StrEnum):
    """How far a combatant may move on the turn the maneuver is taken."""

    NONE = "none"
    STEP = "step"
    HALF = "half"
    FULL = "full"


class DefensePolicy(StrEnum):
    """Active defenses still available after taking the maneuver."""

    ANY = "any"
    NONE = "none"
    DODGE_OR_BLOCK_ONLY = "dodge-block"


class EffectChangeMode(IntEnum):
    """Application modes understood by the host's active-effect store."""

    CUSTOM = 0
    MULTIPLY = 1
    ADD = 2
    DOWNGRADE = 3
    UPGRADE = 4
    OVERRIDE = 5


class LifecycleEvent(StrEnum):
    """Combat lifecycle transitions the binder reacts to."""

    PARTICIPANT_ADDED = "createCombatant"
    PARTICIPANT_REMOVED = "deleteCombatant"
    ENCOUNTER_DESTROYED = "deleteCombat"
