"""Pokemon Repository Protocol Interface."""

from typing import Protocol

from pokebattle.domain.enums import Species
from pokebattle.domain.models import Pokemon, PokemonID


class IPokemonRepository(Protocol):
    """Protocol defining storage operations for Pokemon.

    Every method may suspend on I/O. Mutations are expected to run inside a
    unit of work opened by the caller.
    """

    async def create(self, species: Species, trainer: str) -> Pokemon:
        """Persist a new Pokemon at the starting level and return it."""
        ...

    async def load_by_id(self, pokemon_id: PokemonID) -> Pokemon | None:
        """Return the Pokemon with ``pokemon_id`` or ``None`` if absent."""
        ...

    async def list_all(self) -> list[Pokemon]:
        """Return every stored Pokemon ordered by identifier."""
        ...

    async def update_trainer(self, pokemon_id: PokemonID, trainer: str) -> None:
        """Replace the trainer of a Pokemon."""
        ...

    async def update_level(self, pokemon_id: PokemonID, level: int) -> None:
        """Replace the level of a Pokemon."""
        ...

    async def delete_by_id(self, pokemon_id: PokemonID) -> None:
        """Remove a Pokemon."""
        ...
