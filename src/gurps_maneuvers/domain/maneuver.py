"""Maneuver definitions and the effect payload they project onto tokens.

A :class:`ManeuverDefinition` is an immutable catalog record.  Everything the
host's status-effect store needs is derived from it on demand by
:func:`project`; payloads are never cached, so callers must not rely on
identity between two calls for the same maneuver.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import DefensePolicy, EffectChangeMode, MovePolicy

MANEUVER_STATUS_ID = "maneuver"
FLAG_SCOPE = "gurps"
CORE_SCOPE = "core"
STATUS_ID_FLAG = "statusId"

CONDITION_KEY = "data.conditions.maneuver"
MOVE_OVERRIDE_KEY = "data.moveoverride"
CONDITION_PRIORITY = 10


@dataclass(frozen=True, slots=True)
class ManeuverDefinition:
    """One maneuver's rule effects and presentation metadata."""

    name: str
    label: str
    icon_path: str
    move_policy: MovePolicy = MovePolicy.STEP
    defense_policy: DefensePolicy = DefensePolicy.ANY
    is_full_turn: bool = False
    alt_icon_path: str | None = None

    @classmethod
    def create(
        cls,
        *,
        name: str,
        label: str,
        icon: str,
        base_path: str,
        move: MovePolicy | str | None = None,
        defense: DefensePolicy | str | None = None,
        fullturn: bool | None = None,
        alt: str | None = None,
    ) -> ManeuverDefinition:
        """Build a definition, filling defaults and resolving icon paths."""

        return cls(
            name=name,
            label=label,
            icon_path=base_path + icon,
            move_policy=MovePolicy(move) if move else MovePolicy.STEP,
            defense_policy=DefensePolicy(defense) if defense else DefensePolicy.ANY,
            is_full_turn=bool(fullturn),
            alt_icon_path=base_path + alt if alt else None,
        )


@dataclass(frozen=True, slots=True)
class EffectChange:
    """Declarative field override applied by the host's effect store."""

    key: str
    value: str
    mode: EffectChangeMode
    priority: int | None = None

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {"key": self.key, "value": self.value, "mode": int(self.mode)}
        if self.priority is not None:
            data["priority"] = self.priority
        return data


@dataclass(frozen=True, slots=True)
class ManeuverFlags:
    """Maneuver metadata read directly by attack and defense resolution."""

    name: str
    move: MovePolicy
    defense: DefensePolicy
    fullturn: bool
    icon: str
    alt: str | None

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "move": str(self.move),
            "defense": str(self.defense),
            "fullturn": self.fullturn,
            "icon": self.icon,
            "alt": self.alt,
        }


@dataclass(frozen=True, slots=True)
class ManeuverEffectPayload:
    """Projection of a definition in the shape the status-effect store expects."""

    id: str
    label: str
    icon: str
    flags: ManeuverFlags
    changes: tuple[EffectChange, ...]

    @property
    def name(self) -> str:
        return self.flags.name

    @property
    def move_policy(self) -> MovePolicy:
        return self.flags.move

    @property
    def defense_policy(self) -> DefensePolicy:
        return self.flags.defense

    @property
    def is_full_turn(self) -> bool:
        return self.flags.fullturn

    @property
    def alt_icon_path(self) -> str | None:
        return self.flags.alt

    def to_dict(self) -> dict[str, object]:
        """Return the JSON-compatible effect data."""

        return {
            "id": self.id,
            "label": self.label,
            "icon": self.icon,
            "flags": {FLAG_SCOPE: self.flags.to_dict()},
            "changes": [change.to_dict() for change in self.changes],
        }


def project(definition: ManeuverDefinition) -> ManeuverEffectPayload:
    """Turn a definition into a fresh effect payload."""

    changes = (
        EffectChange(
            key=CONDITION_KEY,
            value=definition.name,
            mode=EffectChangeMode.OVERRIDE,
            priority=CONDITION_PRIORITY,
        ),
        EffectChange(
            key=MOVE_OVERRIDE_KEY,
            value=str(definition.move_policy),
            mode=EffectChangeMode.CUSTOM,
        ),
    )
    return ManeuverEffectPayload(
        id=MANEUVER_STATUS_ID,
        label=definition.label,
        icon=definition.icon_path,
        flags=ManeuverFlags(
            name=definition.name,
            move=definition.move_policy,
            defense=definition.defense_policy,
            fullturn=definition.is_full_turn,
            icon=definition.icon_path,
            alt=definition.alt_icon_path,
        ),
        changes=changes,
    )
