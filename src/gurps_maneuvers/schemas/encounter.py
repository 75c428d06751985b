from typing import Any

from pydantic import BaseModel, Field


class StatusMarkerRead(BaseModel):
    id: str = Field(..., description="Marker identifier")
    label: str = Field(..., description="Display label")
    icon: str = Field(..., description="Icon path")
    flags: dict[str, dict[str, Any]] = Field(default_factory=dict, description="Flags by scope")
    changes: list[dict[str, Any]] = Field(default_factory=list, description="Effect changes")


class TokenCreate(BaseModel):
    id: str | None = Field(None, description="Token id; omit for a combatant without a token")
    name: str = Field(default="", description="Token display name")


class TokenRead(BaseModel):
    id: str | None = Field(None, description="Token id")
    name: str = Field(default="", description="Token display name")
    maneuver: str | None = Field(None, description="Current maneuver name")
    effects: list[StatusMarkerRead] = Field(
        default_factory=list, description="Active markers, maneuvers first"
    )


class CombatantCreate(BaseModel):
    name: str = Field(..., min_length=1, description="Combatant name")
    token: TokenCreate | None = Field(None, description="Placed token bound to the combatant")


class CombatantRead(BaseModel):
    id: str = Field(..., description="Combatant identifier")
    name: str = Field(..., description="Combatant name")
    token: TokenRead | None = Field(None, description="Bound token, if any")


class EncounterCreate(BaseModel):
    name: str = Field(..., min_length=1, description="Encounter name")


class EncounterRead(BaseModel):
    id: str = Field(..., description="Encounter identifier")
    name: str = Field(..., description="Encounter name")
    combatants: list[CombatantRead] = Field(default_factory=list, description="Participants")


class ManeuverAssign(BaseModel):
    maneuver: str = Field(..., min_length=1, description="Catalog name of the maneuver")


class ConditionCreate(BaseModel):
    status_id: str = Field(..., min_length=1, description="Status id of the condition")
    label: str = Field(..., min_length=1, description="Display label")
    icon: str = Field(..., min_length=1, description="Icon path")
