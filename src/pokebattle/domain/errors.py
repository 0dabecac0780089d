"""Errors raised by the Pokebattle domain and use cases."""

from __future__ import annotations


class DomainError(Exception):
    """Base class for expected, caller-facing failures."""


class PokemonNotFoundError(DomainError):
    """A referenced Pokemon does not exist."""

    def __init__(self, pokemon_id: int | None = None) -> None:
        super().__init__("Pokemon not found")
        self.pokemon_id = pokemon_id


class InvalidOperationError(DomainError):
    """The request is well formed but cannot be carried out."""
