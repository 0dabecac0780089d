"""Pokemon lifecycle use cases: create, read, list, update trainer, delete."""

from __future__ import annotations

import logging

from pokebattle.domain.enums import Species
from pokebattle.domain.errors import PokemonNotFoundError
from pokebattle.domain.models import Pokemon, PokemonID
from pokebattle.interfaces import IPokemonRepository

logger = logging.getLogger(__name__)


class PokemonService:
    """Thin use-case layer over the Pokemon repository."""

    def __init__(self, repository: IPokemonRepository):
        self.repository = repository

    async def create(self, species: Species, trainer: str) -> Pokemon:
        """Create a Pokemon; its level always starts at 1."""

        pokemon = await self.repository.create(species, trainer)
        logger.info("created pokemon %s (%s) for %s", int(pokemon.id), species, trainer)
        return pokemon

    async def get(self, pokemon_id: PokemonID) -> Pokemon:
        """Load a single Pokemon or raise ``PokemonNotFoundError``."""

        pokemon = await self.repository.load_by_id(pokemon_id)
        if pokemon is None:
            raise PokemonNotFoundError(pokemon_id)
        return pokemon

    async def list_all(self) -> list[Pokemon]:
        return await self.repository.list_all()

    async def update_trainer(self, pokemon_id: PokemonID, trainer: str) -> None:
        await self.get(pokemon_id)
        await self.repository.update_trainer(pokemon_id, trainer)

    async def delete(self, pokemon_id: PokemonID) -> None:
        await self.get(pokemon_id)
        await self.repository.delete_by_id(pokemon_id)
        logger.info("deleted pokemon %s", int(pokemon_id))
