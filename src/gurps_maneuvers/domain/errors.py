"""Exceptions raised by the maneuver domain."""

from __future__ import annotations


class ManeuverError(Exception):
    """Base class for maneuver domain errors."""


class UnknownManeuver(ManeuverError, LookupError):
    """Raised when a maneuver name is not part of the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown maneuver '{name}'")
        self.name = name


class UnresolvableToken(ManeuverError):
    """A combatant has no placed token with a usable identity.

    Lifecycle handlers treat this as a normal condition and never let it
    escape; it exists so lower layers can signal the case explicitly.
    """

    def __init__(self, combatant_id: object) -> None:
        super().__init__(f"Combatant {combatant_id!r} has no resolvable token")
        self.combatant_id = combatant_id
