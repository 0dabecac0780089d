"""Weighted winner selection for Pokemon battles."""

from __future__ import annotations

from dataclasses import dataclass

from pokebattle.domain.errors import InvalidOperationError
from pokebattle.domain.models import Pokemon
from pokebattle.utils.rng import AmbientRandomSource, RandomSource

_AMBIENT = AmbientRandomSource()


@dataclass(frozen=True, slots=True)
class Matchup:
    """Winner and loser of a battle, as loaded before any level change."""

    winner: Pokemon
    loser: Pokemon


def win_probability(pokemon_a: Pokemon, pokemon_b: Pokemon) -> float:
    """Return the probability that ``pokemon_a`` beats ``pokemon_b``.

    The odds are proportional to level: ``level_a / (level_a + level_b)``.

    Raises:
        InvalidOperationError: If both levels are zero
    """
    total_level = pokemon_a.level + pokemon_b.level
    if total_level <= 0:
        raise InvalidOperationError("At least one pokemon must have a positive level")
    return pokemon_a.level / total_level


def pick_winner_weighted(
    pokemon_a: Pokemon,
    pokemon_b: Pokemon,
    rng: RandomSource | None = None,
) -> Matchup:
    """Decide a battle with win probability proportional to level.

    A single value ``r`` is drawn in ``[0, 1)``; A wins when
    ``r < level_a / (level_a + level_b)``. Equal levels are a fair coin flip.

    Args:
        pokemon_a: First combatant
        pokemon_b: Second combatant
        rng: Source of the uniform draw, defaults to the ambient generator

    Returns:
        Matchup referencing the two inputs unchanged

    Raises:
        InvalidOperationError: If both levels are zero
    """
    probability_a = win_probability(pokemon_a, pokemon_b)
    draw = (rng or _AMBIENT).random()

    if draw < probability_a:
        return Matchup(winner=pokemon_a, loser=pokemon_b)
    return Matchup(winner=pokemon_b, loser=pokemon_a)
