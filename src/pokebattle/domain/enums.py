"""Enumerations for the Pokebattle domain."""

from __future__ import annotations

from enum import StrEnum


class Species(StrEnum):
    """The closed set of species a Pokemon may belong to."""

    PIKACHU = "pikachu"
    CHARIZARD = "charizard"
    MEWTWO = "mewtwo"
