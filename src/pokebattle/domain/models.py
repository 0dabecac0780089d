"""Dataclasses describing Pokebattle entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NewType

from .enums import Species

PokemonID = NewType("PokemonID", int)

STARTING_LEVEL = 1


@dataclass(frozen=True, slots=True)
class Pokemon:
    """A Pokemon as seen by the rules layer.

    ``level`` drives battle odds; a Pokemon whose level drops to zero in a
    battle is removed from storage.
    """

    id: PokemonID
    species: Species
    trainer: str
    level: int = STARTING_LEVEL
