"""Status marker protocol interfaces.

A status marker is an opaque active status on a token.  The maneuver layer
only ever asks it for a namespaced flag value, and only ever asks a token
for its markers in insertion order.
"""

from collections.abc import Sequence
from typing import Protocol


class IStatusMarker(Protocol):
    """Protocol for anything that can report a namespaced flag."""

    def get_flag(self, scope: str, key: str) -> object:
        """Return the flag stored under ``scope``/``key`` or ``None``."""
        ...


class IMarkerHolder(Protocol):
    """Protocol for a token exposing its active status markers."""

    @property
    def active_markers(self) -> Sequence[IStatusMarker]:
        """Active markers in insertion order."""
        ...
