"""Maneuver rules layer.

This package hosts the maneuver catalog and everything derived from it:

* Immutable maneuver definitions and their effect payloads (see :mod:`maneuver`).
* The closed catalog (see :mod:`catalog`) and the read-only registry over it.
* The status ordering policy and the lifecycle hook bus.
* In-memory token, combatant and encounter dataclasses (see :mod:`models`).
"""

from . import catalog, enums, errors, hooks, maneuver, models, ordering, registry

__all__ = [
    "catalog",
    "enums",
    "errors",
    "hooks",
    "maneuver",
    "models",
    "ordering",
    "registry",
]
