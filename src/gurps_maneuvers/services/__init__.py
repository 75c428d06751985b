"""Service layer for maneuver lifecycle handling.

Services depend on the protocol interfaces in :mod:`gurps_maneuvers.interfaces`:

- CombatLifecycleBinder: attaches/detaches maneuvers on lifecycle events
- EncounterService: encounter mutations that emit those lifecycle events

Production Usage:
    from gurps_maneuvers.factory import create_hook_bus, create_registry
    hooks = create_hook_bus(settings, create_registry(settings))

Testing Usage:
    from gurps_maneuvers.services import CombatLifecycleBinder, StaticAuthority

    class FakeToken:
        id = "t1"
        def set_maneuver(self, name, *, registry=None): ...
        def remove_maneuver(self): return 0

    binder = CombatLifecycleBinder(StaticAuthority(True))
    binder.on_participant_added(FakeCombatant(FakeToken()))
"""

from gurps_maneuvers.services.encounter_service import EncounterService
from gurps_maneuvers.services.lifecycle_service import CombatLifecycleBinder, StaticAuthority

__all__ = [
    "CombatLifecycleBinder",
    "EncounterService",
    "StaticAuthority",
]
