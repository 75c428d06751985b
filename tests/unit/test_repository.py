"""Tests for the JSON encounter repository."""

from __future__ import annotations

import pytest

from gurps_maneuvers.domain import models as dm
from gurps_maneuvers.repository import JsonEncounterRepository


def _encounter(encounter_id: str = "e1") -> dm.Encounter:
    token = dm.Token(id=dm.TokenID("tok-1"), name="Guard")
    token.add_condition(dm.StatusMarker.condition("prone", "Prone", "icons/prone.svg"))
    token.set_maneuver("allout_attack")
    return dm.Encounter(
        id=dm.EncounterID(encounter_id),
        name="Ambush",
        combatants=[
            dm.Combatant(id=dm.CombatantID("c1"), name="Guard", token=token),
            dm.Combatant(id=dm.CombatantID("c2"), name="Hidden archer"),
        ],
    )


def test_save_and_load_encounter(tmp_path):
    repo = JsonEncounterRepository(tmp_path)
    encounter = _encounter()

    path = repo.save(encounter)
    assert path.exists()

    loaded = repo.load(dm.EncounterID("e1"))
    assert loaded == encounter
    assert loaded.combatants[0].token.maneuver == "allout_attack"
    assert loaded.combatants[1].token is None


def test_load_missing_raises(tmp_path):
    repo = JsonEncounterRepository(tmp_path)
    with pytest.raises(FileNotFoundError):
        repo.load(dm.EncounterID("nope"))


def test_list_and_delete(tmp_path):
    repo = JsonEncounterRepository(tmp_path)
    repo.save(_encounter("a1"))
    repo.save(_encounter("b2"))

    assert repo.list_encounters() == [dm.EncounterID("a1"), dm.EncounterID("b2")]

    repo.delete(dm.EncounterID("a1"))
    repo.delete(dm.EncounterID("a1"))
    assert repo.list_encounters() == [dm.EncounterID("b2")]
