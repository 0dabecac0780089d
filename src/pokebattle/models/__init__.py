"""SQLAlchemy models for Pokebattle."""

from .base import Base, TimestampMixin
from .pokemon import PokemonRow

__all__ = [
    "Base",
    "PokemonRow",
    "TimestampMixin",
]
