"""Encounter mutations that drive the combat lifecycle hooks.

Each mutation loads the encounter snapshot, emits the matching lifecycle
event on the hook bus so subscribers (the maneuver binder among them) can
react, and persists the result.
"""

from __future__ import annotations

import logging

from gurps_maneuvers.domain import models as dm
from gurps_maneuvers.domain.enums import LifecycleEvent
from gurps_maneuvers.domain.hooks import HookBus
from gurps_maneuvers.domain.maneuver import MANEUVER_STATUS_ID
from gurps_maneuvers.domain.registry import ManeuverRegistry
from gurps_maneuvers.repository import JsonEncounterRepository

logger = logging.getLogger(__name__)


class EncounterService:
    """Create, join, leave and destroy encounters."""

    def __init__(
        self,
        repository: JsonEncounterRepository,
        hooks: HookBus,
        registry: ManeuverRegistry,
        *,
        user_id: str | None = None,
    ) -> None:
        self._repository = repository
        self._hooks = hooks
        self._registry = registry
        self._user_id = user_id

    def list_encounters(self) -> list[dm.Encounter]:
        return [self._repository.load(eid) for eid in self._repository.list_encounters()]

    def get_encounter(self, encounter_id: str) -> dm.Encounter:
        """Load a single encounter or raise ``FileNotFoundError``."""

        return self._repository.load(dm.EncounterID(encounter_id))

    def create_encounter(self, name: str) -> dm.Encounter:
        encounter = dm.Encounter(id=dm.EncounterID(dm.new_id()), name=name)
        self._repository.save(encounter)
        return encounter

    def add_combatant(
        self, encounter_id: str, name: str, token: dm.Token | None = None
    ) -> dm.Combatant:
        """Add a combatant and announce it to the lifecycle hooks."""

        encounter = self.get_encounter(encounter_id)
        combatant = dm.Combatant(id=dm.CombatantID(dm.new_id()), name=name, token=token)
        encounter.combatants.append(combatant)
        self._hooks.emit(LifecycleEvent.PARTICIPANT_ADDED, combatant, {}, self._user_id)
        self._repository.save(encounter)
        return combatant

    def remove_combatant(self, encounter_id: str, combatant_id: str) -> dm.Combatant:
        """Drop a combatant and announce the removal.

        Raises:
            ValueError: If the combatant is not part of the encounter
        """

        encounter = self.get_encounter(encounter_id)
        combatant = self._require_combatant(encounter, combatant_id)
        encounter.combatants.remove(combatant)
        self._hooks.emit(LifecycleEvent.PARTICIPANT_REMOVED, combatant, {}, self._user_id)
        self._repository.save(encounter)
        return combatant

    def delete_encounter(self, encounter_id: str) -> dm.Encounter:
        """Announce the encounter's destruction, then delete its snapshot."""

        encounter = self.get_encounter(encounter_id)
        self._hooks.emit(LifecycleEvent.ENCOUNTER_DESTROYED, encounter, {}, self._user_id)
        self._repository.delete(encounter.id)
        logger.info(
            "encounter %s deleted with %d combatants", encounter.id, len(encounter.combatants)
        )
        return encounter

    def set_maneuver(self, encounter_id: str, combatant_id: str, maneuver: str) -> dm.Token:
        """Declare a maneuver for a combatant's token.

        Raises:
            UnknownManeuver: If the maneuver is not cataloged
            UnresolvableToken: If the combatant has no placed token
        """

        encounter = self.get_encounter(encounter_id)
        token = self._require_combatant(encounter, combatant_id).resolve_token()
        token.set_maneuver(maneuver, registry=self._registry)
        self._repository.save(encounter)
        return token

    def add_condition(
        self, encounter_id: str, combatant_id: str, status_id: str, label: str, icon: str
    ) -> dm.Token:
        """Attach a non-maneuver status marker to a combatant's token."""

        if status_id == MANEUVER_STATUS_ID:
            raise ValueError("use set_maneuver to assign a maneuver")
        encounter = self.get_encounter(encounter_id)
        token = self._require_combatant(encounter, combatant_id).resolve_token()
        token.add_condition(dm.StatusMarker.condition(status_id, label, icon))
        self._repository.save(encounter)
        return token

    @staticmethod
    def _require_combatant(encounter: dm.Encounter, combatant_id: str) -> dm.Combatant:
        combatant = encounter.find_combatant(combatant_id)
        if combatant is None:
            raise ValueError(f"Combatant '{combatant_id}' not in encounter '{encounter.id}'")
        return combatant
