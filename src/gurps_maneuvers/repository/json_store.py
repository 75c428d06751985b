"""JSON-based repository for combat encounters."""

from __future__ import annotations

from pathlib import Path

from pydantic import TypeAdapter

from gurps_maneuvers.domain import models as dm


class JsonEncounterRepository:
    """Persist encounters as JSON snapshots on disk."""

    def __init__(self, base_path: Path) -> None:
        self.base_path = base_path
        self.base_path.mkdir(parents=True, exist_ok=True)
        self._adapter: TypeAdapter[dm.Encounter] = TypeAdapter(dm.Encounter)

    def _path_for(self, encounter_id: dm.EncounterID) -> Path:
        return self.base_path / f"encounter_{encounter_id}.json"

    def save(self, encounter: dm.Encounter) -> Path:
        """Serialize an encounter to disk and return the snapshot path."""

        path = self._path_for(encounter.id)
        path.write_bytes(self._adapter.dump_json(encounter, indent=2))
        return path

    def load(self, encounter_id: dm.EncounterID) -> dm.Encounter:
        """Load a previously saved encounter or raise ``FileNotFoundError``."""

        data = self._path_for(encounter_id).read_bytes()
        return self._adapter.validate_json(data)

    def list_encounters(self) -> list[dm.EncounterID]:
        """Return all encounter ids currently persisted, sorted."""

        prefix = "encounter_"
        suffix = ".json"
        ids = [
            dm.EncounterID(path.name[len(prefix) : -len(suffix)])
            for path in self.base_path.glob("encounter_*.json")
        ]
        return sorted(ids)

    def delete(self, encounter_id: dm.EncounterID) -> None:
        """Remove an encounter snapshot if it exists."""

        path = self._path_for(encounter_id)
        if path.exists():
            path.unlink()
