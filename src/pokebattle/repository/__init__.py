"""Persistence adapters for Pokebattle."""

from .sql_store import SqlPokemonRepository

__all__ = ["SqlPokemonRepository"]
