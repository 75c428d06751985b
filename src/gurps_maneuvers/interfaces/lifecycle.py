"""Combat lifecycle protocol interfaces.

This module defines the collaborator contracts consumed by the combat
lifecycle binder: tokens that can carry a maneuver, combatants that may be
bound to a token, encounters that enumerate combatants, and the authority
check consulted before any mutation.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from gurps_maneuvers.domain.registry import ManeuverRegistry


class IManeuverToken(Protocol):
    """Protocol for a placed token that can carry a maneuver."""

    @property
    def id(self) -> str | None:
        """Identity of the token, or ``None`` when it cannot be resolved."""
        ...

    def set_maneuver(self, name: str, *, registry: ManeuverRegistry | None = None) -> object:
        """Replace the token's maneuver with the named one.

        Args:
            name: Catalog name of the maneuver
            registry: Registry to resolve the name against

        Raises:
            UnknownManeuver: If ``name`` is not in the catalog
        """
        ...

    def remove_maneuver(self) -> int:
        """Remove any maneuver from the token.

        Returns:
            Number of maneuver markers removed (0 when there were none)
        """
        ...


class ICombatant(Protocol):
    """Protocol for one participant slot within an encounter."""

    @property
    def id(self) -> str:
        ...

    @property
    def token(self) -> IManeuverToken | None:
        """The placed token bound to this combatant, if any."""
        ...


class IEncounter(Protocol):
    """Protocol for a tracked combat encounter."""

    @property
    def id(self) -> str:
        ...

    @property
    def combatants(self) -> Iterable[ICombatant]:
        ...


class IAuthority(Protocol):
    """Protocol deciding whether the current caller may mutate combat state."""

    def is_privileged(self) -> bool:
        """Return True when the current user has game-master authority."""
        ...
