"""In-memory combat entities the maneuver layer operates on.

These dataclasses stand in for the host's token, combatant and encounter
documents.  They implement the collaborator protocols from
:mod:`gurps_maneuvers.interfaces` and can be persisted as JSON snapshots
through :mod:`gurps_maneuvers.repository`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NewType
from uuid import uuid4

from .errors import UnresolvableToken
from .maneuver import CORE_SCOPE, FLAG_SCOPE, STATUS_ID_FLAG, ManeuverEffectPayload
from .ordering import order_markers
from .registry import ManeuverRegistry, get_registry, is_marker_maneuver

EncounterID = NewType("EncounterID", str)
CombatantID = NewType("CombatantID", str)
TokenID = NewType("TokenID", str)
MarkerID = NewType("MarkerID", str)


def new_id() -> str:
    return uuid4().hex[:16]


@dataclass(slots=True)
class StatusMarker:
    """One active status shown on a token."""

    id: MarkerID
    label: str
    icon: str
    flags: dict[str, dict[str, object]] = field(default_factory=dict)
    changes: list[dict[str, object]] = field(default_factory=list)

    def get_flag(self, scope: str, key: str) -> object:
        return self.flags.get(scope, {}).get(key)

    @classmethod
    def condition(cls, status_id: str, label: str, icon: str) -> StatusMarker:
        """Build a plain (non-maneuver) condition marker."""

        return cls(
            id=MarkerID(new_id()),
            label=label,
            icon=icon,
            flags={CORE_SCOPE: {STATUS_ID_FLAG: status_id}},
        )

    @classmethod
    def from_payload(cls, payload: ManeuverEffectPayload) -> StatusMarker:
        return cls(
            id=MarkerID(new_id()),
            label=payload.label,
            icon=payload.icon,
            flags={
                CORE_SCOPE: {STATUS_ID_FLAG: payload.id},
                FLAG_SCOPE: payload.flags.to_dict(),
            },
            changes=[change.to_dict() for change in payload.changes],
        )


@dataclass(slots=True)
class Token:
    """Placed token carrying active status markers."""

    id: TokenID | None
    name: str = ""
    effects: list[StatusMarker] = field(default_factory=list)

    @property
    def active_markers(self) -> list[StatusMarker]:
        """Markers in insertion order."""

        return list(self.effects)

    @property
    def ordered_active_markers(self) -> list[StatusMarker]:
        return order_markers(self.effects)

    @property
    def maneuver(self) -> str | None:
        """Name of the maneuver currently on the token, if any."""

        for marker in self.effects:
            if is_marker_maneuver(marker):
                name = marker.get_flag(FLAG_SCOPE, "name")
                return str(name) if name is not None else None
        return None

    def add_condition(self, marker: StatusMarker) -> None:
        self.effects.append(marker)

    def set_maneuver(
        self, name: str, *, registry: ManeuverRegistry | None = None
    ) -> StatusMarker:
        """Replace any maneuver on the token with ``name``.

        Raises:
            UnknownManeuver: If ``name`` is not cataloged; the token is left untouched.
        """

        payload = (registry if registry is not None else get_registry()).get(name)
        self.remove_maneuver()
        marker = StatusMarker.from_payload(payload)
        self.effects.append(marker)
        return marker

    def remove_maneuver(self) -> int:
        """Remove every maneuver marker. Safe to call on a token without one."""

        before = len(self.effects)
        self.effects = [marker for marker in self.effects if not is_marker_maneuver(marker)]
        return before - len(self.effects)


@dataclass(slots=True)
class Combatant:
    """A participant slot in an encounter, optionally bound to a token."""

    id: CombatantID
    name: str = ""
    token: Token | None = None

    def resolve_token(self) -> Token:
        """Return the bound token or raise ``UnresolvableToken``."""

        if self.token is None or not self.token.id:
            raise UnresolvableToken(self.id)
        return self.token


@dataclass(slots=True)
class Encounter:
    """A tracked sequence of combatant turns."""

    id: EncounterID
    name: str
    combatants: list[Combatant] = field(default_factory=list)

    def find_combatant(self, combatant_id: str) -> Combatant | None:
        for combatant in self.combatants:
            if combatant.id == combatant_id:
                return combatant
        return None
