"""Utility functions for Pokebattle."""

from pokebattle.utils.rng import (
    AmbientRandomSource,
    RandomSource,
    seeded_source,
    source_for,
)

__all__ = [
    "AmbientRandomSource",
    "RandomSource",
    "seeded_source",
    "source_for",
]
