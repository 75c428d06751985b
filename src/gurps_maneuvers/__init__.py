"""GURPS combat maneuvers: catalog, registry and combat lifecycle binding."""

from gurps_maneuvers.domain.errors import ManeuverError, UnknownManeuver, UnresolvableToken
from gurps_maneuvers.domain.registry import ManeuverRegistry, get_registry, initialize_registry

__all__ = [
    "ManeuverError",
    "ManeuverRegistry",
    "UnknownManeuver",
    "UnresolvableToken",
    "get_registry",
    "initialize_registry",
]
