"""Runtime primitives backing the maneuver HTTP API."""

from __future__ import annotations

import logging

from gurps_maneuvers.config import Settings, get_settings
from gurps_maneuvers.domain import models as dm
from gurps_maneuvers.domain.registry import ManeuverRegistry
from gurps_maneuvers.factory import create_hook_bus, create_registry
from gurps_maneuvers.repository import JsonEncounterRepository
from gurps_maneuvers.services.encounter_service import EncounterService

logger = logging.getLogger(__name__)


def to_token_dict(token: dm.Token) -> dict[str, object]:
    """Return a JSON-friendly token with its markers in display order."""

    return {
        "id": token.id,
        "name": token.name,
        "maneuver": token.maneuver,
        "effects": [
            {
                "id": marker.id,
                "label": marker.label,
                "icon": marker.icon,
                "flags": marker.flags,
                "changes": marker.changes,
            }
            for marker in token.ordered_active_markers
        ],
    }


def to_combatant_dict(combatant: dm.Combatant) -> dict[str, object]:
    return {
        "id": combatant.id,
        "name": combatant.name,
        "token": to_token_dict(combatant.token) if combatant.token is not None else None,
    }


def to_encounter_dict(encounter: dm.Encounter) -> dict[str, object]:
    return {
        "id": encounter.id,
        "name": encounter.name,
        "combatants": [to_combatant_dict(c) for c in encounter.combatants],
    }


class ApiState:
    """Aggregated services shared by the FastAPI layer."""

    def __init__(self, *, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.registry: ManeuverRegistry = create_registry(self.settings)
        self.repository = JsonEncounterRepository(self.settings.data_dir)
        self.hooks = create_hook_bus(self.settings, self.registry)
        self.encounters = EncounterService(self.repository, self.hooks, self.registry)
        logger.info(
            "maneuver API ready: %d maneuvers, data in %s",
            len(self.registry),
            self.settings.data_dir,
        )

    async def shutdown(self) -> None:
        self.hooks.clear()


def build_state() -> ApiState:
    """Factory used by the API to initialize state."""

    return ApiState()
