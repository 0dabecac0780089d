"""Unit tests for PokemonService."""

import pytest

from pokebattle.domain import models as dm
from pokebattle.domain.enums import Species
from pokebattle.domain.errors import PokemonNotFoundError
from pokebattle.services.pokemon_service import PokemonService


@pytest.mark.asyncio
async def test_create_starts_at_level_one(repository):
    service = PokemonService(repository)

    pokemon = await service.create(Species.MEWTWO, "Giovanni")

    assert pokemon.level == 1
    assert pokemon.species == Species.MEWTWO
    assert pokemon.trainer == "Giovanni"
    assert repository.rows[pokemon.id] == pokemon


@pytest.mark.asyncio
async def test_get_returns_stored_pokemon(repository):
    stored = repository.seed(4, species=Species.CHARIZARD, trainer="Red")
    service = PokemonService(repository)

    assert await service.get(stored.id) == stored


@pytest.mark.asyncio
async def test_get_unknown_raises(repository):
    service = PokemonService(repository)

    with pytest.raises(PokemonNotFoundError) as excinfo:
        await service.get(dm.PokemonID(42))

    assert excinfo.value.pokemon_id == 42


@pytest.mark.asyncio
async def test_list_all_orders_by_id(repository):
    first = repository.seed(1)
    second = repository.seed(3)
    service = PokemonService(repository)

    assert await service.list_all() == [first, second]


@pytest.mark.asyncio
async def test_list_all_empty(repository):
    assert await PokemonService(repository).list_all() == []


@pytest.mark.asyncio
async def test_update_trainer(repository):
    stored = repository.seed(2, trainer="Ash")
    service = PokemonService(repository)

    await service.update_trainer(stored.id, "Misty")

    assert repository.rows[stored.id].trainer == "Misty"
    assert repository.rows[stored.id].level == 2


@pytest.mark.asyncio
async def test_update_trainer_unknown_does_not_mutate(repository):
    service = PokemonService(repository)

    with pytest.raises(PokemonNotFoundError):
        await service.update_trainer(dm.PokemonID(5), "Brock")

    assert repository.mutations == []


@pytest.mark.asyncio
async def test_delete(repository):
    stored = repository.seed()
    service = PokemonService(repository)

    await service.delete(stored.id)

    assert stored.id not in repository.rows


@pytest.mark.asyncio
async def test_delete_unknown_does_not_mutate(repository):
    service = PokemonService(repository)

    with pytest.raises(PokemonNotFoundError):
        await service.delete(dm.PokemonID(5))

    assert repository.mutations == []
