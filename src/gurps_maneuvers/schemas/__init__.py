from .encounter import (
    CombatantCreate,
    CombatantRead,
    ConditionCreate,
    EncounterCreate,
    EncounterRead,
    ManeuverAssign,
    StatusMarkerRead,
    TokenCreate,
    TokenRead,
)
from .maneuver import EffectChangeRead, ManeuverFlagsRead, ManeuverRead

__all__ = [
    "CombatantCreate",
    "CombatantRead",
    "ConditionCreate",
    "EffectChangeRead",
    "EncounterCreate",
    "EncounterRead",
    "ManeuverAssign",
    "ManeuverFlagsRead",
    "ManeuverRead",
    "StatusMarkerRead",
    "TokenCreate",
    "TokenRead",
]
