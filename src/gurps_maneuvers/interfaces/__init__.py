"""Protocol-based interfaces for the maneuver collaborators.

This module exports the protocol interfaces the maneuver layer consumes,
providing a clear contract for host implementations and enabling
dependency injection and testing.
"""

from gurps_maneuvers.interfaces.lifecycle import (
    IAuthority,
    ICombatant,
    IEncounter,
    IManeuverToken,
)
from gurps_maneuvers.interfaces.markers import IMarkerHolder, IStatusMarker

__all__ = [
    "IAuthority",
    "ICombatant",
    "IEncounter",
    "IManeuverToken",
    "IMarkerHolder",
    "IStatusMarker",
]
