"""Pytest configuration and shared fakes.

Adds the `src/` directory to `sys.path` so tests can import the
`pokebattle` package without requiring an editable install in CI, and
provides protocol-based fakes for the repository and unit of work.
"""

import asyncio
import sys
from dataclasses import replace
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from pokebattle.domain import models as dm  # noqa: E402
from pokebattle.domain.enums import Species  # noqa: E402


class InMemoryPokemonRepository:
    """Dict-backed repository recording every mutation it receives."""

    def __init__(self) -> None:
        self.rows: dict[dm.PokemonID, dm.Pokemon] = {}
        self.mutations: list[tuple[object, ...]] = []
        self.loads: list[dm.PokemonID] = []
        self._next_id = 1

    def reset(self) -> None:
        self.rows.clear()
        self.mutations.clear()
        self.loads.clear()
        self._next_id = 1

    def seed(
        self,
        level: int = dm.STARTING_LEVEL,
        *,
        species: Species = Species.PIKACHU,
        trainer: str = "Ash",
    ) -> dm.Pokemon:
        pokemon = dm.Pokemon(
            id=dm.PokemonID(self._next_id), species=species, trainer=trainer, level=level
        )
        self._next_id += 1
        self.rows[pokemon.id] = pokemon
        return pokemon

    async def create(self, species: Species, trainer: str) -> dm.Pokemon:
        self.mutations.append(("create", species, trainer))
        return self.seed(species=species, trainer=trainer)

    async def load_by_id(self, pokemon_id: dm.PokemonID) -> dm.Pokemon | None:
        self.loads.append(pokemon_id)
        await asyncio.sleep(0)
        return self.rows.get(pokemon_id)

    async def list_all(self) -> list[dm.Pokemon]:
        return [self.rows[key] for key in sorted(self.rows)]

    async def update_trainer(self, pokemon_id: dm.PokemonID, trainer: str) -> None:
        self.mutations.append(("update_trainer", pokemon_id, trainer))
        self.rows[pokemon_id] = replace(self.rows[pokemon_id], trainer=trainer)

    async def update_level(self, pokemon_id: dm.PokemonID, level: int) -> None:
        self.mutations.append(("update_level", pokemon_id, level))
        self.rows[pokemon_id] = replace(self.rows[pokemon_id], level=level)

    async def delete_by_id(self, pokemon_id: dm.PokemonID) -> None:
        self.mutations.append(("delete_by_id", pokemon_id))
        self.rows.pop(pokemon_id, None)


class InMemoryUnitOfWork:
    """Snapshots the repository on open and restores it on rollback."""

    def __init__(self, repository: InMemoryPokemonRepository) -> None:
        self.repository = repository
        self.events: list[str] = []
        self._snapshot: dict[dm.PokemonID, dm.Pokemon] | None = None

    async def open(self) -> None:
        self.events.append("open")
        self._snapshot = dict(self.repository.rows)

    async def commit(self) -> None:
        self.events.append("commit")
        self._snapshot = None

    async def rollback(self) -> None:
        self.events.append("rollback")
        if self._snapshot is not None:
            self.repository.rows.clear()
            self.repository.rows.update(self._snapshot)
            self._snapshot = None

    async def release(self) -> None:
        self.events.append("release")


class FixedRandom:
    """Random source replaying a fixed sequence of draws."""

    def __init__(self, *values: float) -> None:
        self._values = list(values)

    def random(self) -> float:
        return self._values.pop(0)


@pytest.fixture
def repository() -> InMemoryPokemonRepository:
    return InMemoryPokemonRepository()


@pytest.fixture
def unit_of_work(repository: InMemoryPokemonRepository) -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork(repository)


@pytest.fixture
def fixed_rng():
    """Factory building a random source that returns the given draws in order."""

    return FixedRandom
