"""Persistence adapters for encounters."""

from gurps_maneuvers.repository.json_store import JsonEncounterRepository

__all__ = ["JsonEncounterRepository"]
