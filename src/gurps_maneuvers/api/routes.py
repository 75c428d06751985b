"""HTTP routes for the maneuver API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from gurps_maneuvers.api.runtime import (
    ApiState,
    to_combatant_dict,
    to_encounter_dict,
    to_token_dict,
)
from gurps_maneuvers.domain import models as dm
from gurps_maneuvers.domain.errors import UnknownManeuver, UnresolvableToken
from gurps_maneuvers.schemas import (
    CombatantCreate,
    CombatantRead,
    ConditionCreate,
    EncounterCreate,
    EncounterRead,
    ManeuverAssign,
    ManeuverRead,
    TokenRead,
)

router = APIRouter()


def get_state(request: Request) -> ApiState:
    state = getattr(request.app.state, "api_state", None)
    if state is None:  # pragma: no cover - FastAPI should always initialise state
        raise RuntimeError("API state not initialised")
    return state


ApiStateDep = Annotated[ApiState, Depends(get_state)]


def _encounter_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="encounter not found")


@router.get("/health")
async def health(state: ApiStateDep) -> dict[str, object]:
    return {
        "status": "ok",
        "maneuver_count": len(state.registry),
        "icon_base_path": state.settings.icon_base_path,
        "game_master": state.settings.game_master,
    }


@router.get("/maneuvers", response_model=dict[str, ManeuverRead])
async def list_maneuvers(state: ApiStateDep) -> dict[str, ManeuverRead]:
    return {
        name: ManeuverRead.model_validate(payload.to_dict())
        for name, payload in state.registry.export_all().items()
    }


@router.get("/maneuvers/by-icon", response_model=list[ManeuverRead])
async def maneuvers_by_icon(
    state: ApiStateDep, path: Annotated[str, Query(min_length=1)]
) -> list[ManeuverRead]:
    return [ManeuverRead.model_validate(p.to_dict()) for p in state.registry.get_by_icon(path)]


@router.get("/maneuvers/{name}", response_model=ManeuverRead)
async def get_maneuver(name: str, state: ApiStateDep) -> ManeuverRead:
    try:
        payload = state.registry.get(name)
    except UnknownManeuver as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return ManeuverRead.model_validate(payload.to_dict())


@router.get("/encounters", response_model=list[EncounterRead])
async def list_encounters(state: ApiStateDep) -> list[EncounterRead]:
    return [
        EncounterRead.model_validate(to_encounter_dict(e))
        for e in state.encounters.list_encounters()
    ]


@router.post("/encounters", response_model=EncounterRead, status_code=status.HTTP_201_CREATED)
async def create_encounter(request: EncounterCreate, state: ApiStateDep) -> EncounterRead:
    encounter = state.encounters.create_encounter(request.name)
    return EncounterRead.model_validate(to_encounter_dict(encounter))


@router.get("/encounters/{encounter_id}", response_model=EncounterRead)
async def get_encounter(encounter_id: str, state: ApiStateDep) -> EncounterRead:
    try:
        encounter = state.encounters.get_encounter(encounter_id)
    except FileNotFoundError as exc:
        raise _encounter_not_found() from exc
    return EncounterRead.model_validate(to_encounter_dict(encounter))


@router.delete("/encounters/{encounter_id}", response_model=EncounterRead)
async def delete_encounter(encounter_id: str, state: ApiStateDep) -> EncounterRead:
    try:
        encounter = state.encounters.delete_encounter(encounter_id)
    except FileNotFoundError as exc:
        raise _encounter_not_found() from exc
    return EncounterRead.model_validate(to_encounter_dict(encounter))


@router.post(
    "/encounters/{encounter_id}/combatants",
    response_model=CombatantRead,
    status_code=status.HTTP_201_CREATED,
)
async def add_combatant(
    encounter_id: str, request: CombatantCreate, state: ApiStateDep
) -> CombatantRead:
    token = None
    if request.token is not None:
        token_id = dm.TokenID(request.token.id) if request.token.id else None
        token = dm.Token(id=token_id, name=request.token.name)
    try:
        combatant = state.encounters.add_combatant(encounter_id, request.name, token)
    except FileNotFoundError as exc:
        raise _encounter_not_found() from exc
    return CombatantRead.model_validate(to_combatant_dict(combatant))


@router.delete(
    "/encounters/{encounter_id}/combatants/{combatant_id}", response_model=CombatantRead
)
async def remove_combatant(
    encounter_id: str, combatant_id: str, state: ApiStateDep
) -> CombatantRead:
    try:
        combatant = state.encounters.remove_combatant(encounter_id, combatant_id)
    except FileNotFoundError as exc:
        raise _encounter_not_found() from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return CombatantRead.model_validate(to_combatant_dict(combatant))


@router.put(
    "/encounters/{encounter_id}/combatants/{combatant_id}/maneuver", response_model=TokenRead
)
async def set_maneuver(
    encounter_id: str, combatant_id: str, request: ManeuverAssign, state: ApiStateDep
) -> TokenRead:
    try:
        token = state.encounters.set_maneuver(encounter_id, combatant_id, request.maneuver)
    except FileNotFoundError as exc:
        raise _encounter_not_found() from exc
    except UnknownManeuver as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except UnresolvableToken as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return TokenRead.model_validate(to_token_dict(token))


@router.post(
    "/encounters/{encounter_id}/combatants/{combatant_id}/conditions",
    response_model=TokenRead,
    status_code=status.HTTP_201_CREATED,
)
async def add_condition(
    encounter_id: str, combatant_id: str, request: ConditionCreate, state: ApiStateDep
) -> TokenRead:
    try:
        token = state.encounters.add_condition(
            encounter_id, combatant_id, request.status_id, request.label, request.icon
        )
    except FileNotFoundError as exc:
        raise _encounter_not_found() from exc
    except UnresolvableToken as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return TokenRead.model_validate(to_token_dict(token))
