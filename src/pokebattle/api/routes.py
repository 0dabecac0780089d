"""HTTP routes for the Pokebattle API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response, status
from pydantic import BaseModel

from pokebattle.api.runtime import ApiState
from pokebattle.domain import models as dm
from pokebattle.domain.errors import InvalidOperationError, PokemonNotFoundError
from pokebattle.factory import create_battle_service, create_pokemon_service
from pokebattle.schemas import BattleRead, PokemonCreate, PokemonRead, TrainerUpdate
from pokebattle.transaction import SqlUnitOfWork, transactional

router = APIRouter()


def get_state(request: Request) -> ApiState:
    state = getattr(request.app.state, "api_state", None)
    if state is None:  # pragma: no cover - FastAPI should always initialise state
        raise RuntimeError("API state not initialised")
    return state


ApiStateDep = Annotated[ApiState, Depends(get_state)]


def get_unit_of_work(state: ApiStateDep) -> SqlUnitOfWork:
    return state.unit_of_work()


UnitOfWorkDep = Annotated[SqlUnitOfWork, Depends(get_unit_of_work)]

# Identifiers are stored as signed 64-bit integers.
MAX_POKEMON_ID = 2**63 - 1
PokemonIdPath = Annotated[int, Path(ge=1, le=MAX_POKEMON_ID)]


def _not_found(exc: PokemonNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


class HealthResponse(BaseModel):
    status: str
    uptime_seconds: float
    version: str
    database: str


@router.get("/healthz", response_model=HealthResponse)
async def healthz(state: ApiStateDep) -> HealthResponse:
    healthy = await state.database_healthy()
    return HealthResponse(
        status="ok",
        uptime_seconds=state.uptime_seconds,
        version=state.settings.app_version,
        database="connected" if healthy else "unavailable",
    )


@router.post(
    "/pokemons",
    response_model=PokemonRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_pokemon(request: PokemonCreate, uow: UnitOfWorkDep) -> PokemonRead:
    service = create_pokemon_service(uow)
    pokemon = await transactional(service.create, uow)(request.species, request.trainer)
    return PokemonRead.model_validate(pokemon)


@router.get("/pokemons", response_model=list[PokemonRead])
async def list_pokemons(uow: UnitOfWorkDep) -> list[PokemonRead]:
    service = create_pokemon_service(uow)
    pokemons = await transactional(service.list_all, uow)()
    return [PokemonRead.model_validate(pokemon) for pokemon in pokemons]


@router.get("/pokemons/{pokemon_id}", response_model=PokemonRead)
async def get_pokemon(pokemon_id: PokemonIdPath, uow: UnitOfWorkDep) -> PokemonRead:
    service = create_pokemon_service(uow)
    try:
        pokemon = await transactional(service.get, uow)(dm.PokemonID(pokemon_id))
    except PokemonNotFoundError as exc:
        raise _not_found(exc) from exc
    return PokemonRead.model_validate(pokemon)


@router.put("/pokemons/{pokemon_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_pokemon_trainer(
    pokemon_id: PokemonIdPath,
    request: TrainerUpdate,
    uow: UnitOfWorkDep,
) -> Response:
    service = create_pokemon_service(uow)
    try:
        await transactional(service.update_trainer, uow)(
            dm.PokemonID(pokemon_id), request.trainer
        )
    except PokemonNotFoundError as exc:
        raise _not_found(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/pokemons/{pokemon_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_pokemon(pokemon_id: PokemonIdPath, uow: UnitOfWorkDep) -> Response:
    service = create_pokemon_service(uow)
    try:
        await transactional(service.delete, uow)(dm.PokemonID(pokemon_id))
    except PokemonNotFoundError as exc:
        raise _not_found(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/battle/{pokemon_a_id}/{pokemon_b_id}", response_model=BattleRead)
async def battle(
    pokemon_a_id: PokemonIdPath,
    pokemon_b_id: PokemonIdPath,
    state: ApiStateDep,
    uow: UnitOfWorkDep,
) -> BattleRead:
    service = create_battle_service(
        uow,
        rng=state.rng,
        lock_rows=state.settings.battle_lock_rows,
    )
    try:
        result = await transactional(service.battle, uow)(
            dm.PokemonID(pokemon_a_id), dm.PokemonID(pokemon_b_id)
        )
    except InvalidOperationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except PokemonNotFoundError as exc:
        raise _not_found(exc) from exc
    return BattleRead.model_validate(result)
