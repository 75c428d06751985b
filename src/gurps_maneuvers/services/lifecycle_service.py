"""Combat lifecycle binding for maneuvers.

Keeps a token's maneuver in step with its combat participation:

- a combatant joining an encounter gets the default maneuver;
- a combatant leaving an encounter loses its maneuver;
- destroying an encounter strips the maneuver from every remaining combatant.

Every handler is gated on :meth:`IAuthority.is_privileged` so that, when many
clients observe the same event, only the game master mutates shared state.
Combatants without a resolvable token are skipped; that is a normal state,
not an error.
"""

from __future__ import annotations

import logging
from typing import Any

from gurps_maneuvers.domain.enums import LifecycleEvent
from gurps_maneuvers.domain.hooks import HookBus
from gurps_maneuvers.domain.registry import ManeuverRegistry, get_registry
from gurps_maneuvers.interfaces import IAuthority, ICombatant, IEncounter, IManeuverToken

logger = logging.getLogger(__name__)

DEFAULT_MANEUVER = "do_nothing"


class StaticAuthority:
    """Authority whose answer is fixed when the process starts."""

    def __init__(self, privileged: bool) -> None:
        self.privileged = privileged

    def is_privileged(self) -> bool:
        return self.privileged


def _resolve_token(combatant: ICombatant | None) -> IManeuverToken | None:
    token = getattr(combatant, "token", None) if combatant is not None else None
    if token is None or not getattr(token, "id", None):
        return None
    return token


class CombatLifecycleBinder:
    """Attach and detach maneuvers in response to lifecycle events."""

    def __init__(
        self,
        authority: IAuthority,
        *,
        registry: ManeuverRegistry | None = None,
        default_maneuver: str = DEFAULT_MANEUVER,
    ):
        self.authority = authority
        self.registry = registry if registry is not None else get_registry()
        self.default_maneuver = default_maneuver

    def register(self, bus: HookBus) -> None:
        bus.on(LifecycleEvent.PARTICIPANT_ADDED, self.on_participant_added)
        bus.on(LifecycleEvent.PARTICIPANT_REMOVED, self.on_participant_removed)
        bus.on(LifecycleEvent.ENCOUNTER_DESTROYED, self.on_encounter_destroyed)

    def unregister(self, bus: HookBus) -> None:
        bus.off(LifecycleEvent.PARTICIPANT_ADDED, self.on_participant_added)
        bus.off(LifecycleEvent.PARTICIPANT_REMOVED, self.on_participant_removed)
        bus.off(LifecycleEvent.ENCOUNTER_DESTROYED, self.on_encounter_destroyed)

    def on_participant_added(
        self, combatant: ICombatant | None, options: Any = None, user_id: Any = None
    ) -> list[str]:
        """Give a newly added combatant's token the default maneuver.

        Returns:
            Ids of the tokens that were changed (empty on a no-op)
        """

        if not self.authority.is_privileged():
            return []
        token = _resolve_token(combatant)
        if token is None:
            logger.debug(
                "combatant %s added without a token (user %s)",
                getattr(combatant, "id", None),
                user_id,
            )
            return []
        token.set_maneuver(self.default_maneuver, registry=self.registry)
        logger.debug(
            "combatant %s added: token[%s] set to %s",
            getattr(combatant, "id", None),
            token.id,
            self.default_maneuver,
        )
        return [str(token.id)]

    def on_participant_removed(
        self, combatant: ICombatant | None, options: Any = None, user_id: Any = None
    ) -> list[str]:
        """Remove the maneuver from a departing combatant's token."""

        if not self.authority.is_privileged():
            return []
        token = _resolve_token(combatant)
        if token is None:
            logger.debug(
                "combatant %s removed without a token (user %s)",
                getattr(combatant, "id", None),
                user_id,
            )
            return []
        logger.info("Delete Combatant: remove maneuver token[%s]", token.id)
        token.remove_maneuver()
        return [str(token.id)]

    def on_encounter_destroyed(
        self, encounter: IEncounter, options: Any = None, user_id: Any = None
    ) -> list[str]:
        """Remove maneuvers from every combatant still bound to the encounter."""

        if not self.authority.is_privileged():
            return []
        cleared: list[str] = []
        for combatant in list(encounter.combatants):
            token = _resolve_token(combatant)
            if token is None:
                logger.debug(
                    "encounter %s: combatant %s has no token, skipped",
                    encounter.id,
                    getattr(combatant, "id", None),
                )
                continue
            logger.info("Delete Combat: remove maneuver token[%s]", token.id)
            token.remove_maneuver()
            cleared.append(str(token.id))
        return cleared
