"""Display ordering for a token's active status markers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from gurps_maneuvers.interfaces.markers import IMarkerHolder, IStatusMarker

from .registry import is_marker_maneuver

M = TypeVar("M", bound=IStatusMarker)


def order_markers(markers: Sequence[M]) -> list[M]:
    """Move maneuver markers to the front, keeping relative order in each group."""

    if len(markers) <= 1:
        return list(markers)
    maneuvers = [marker for marker in markers if is_marker_maneuver(marker)]
    others = [marker for marker in markers if not is_marker_maneuver(marker)]
    return maneuvers + others


def ordered_active_markers(token: IMarkerHolder) -> list[IStatusMarker]:
    """Return ``token.active_markers`` with maneuvers first. Recomputed every call."""

    return order_markers(token.active_markers)
