"""Battle Orchestration Service for Pokebattle.

This module loads two Pokemon, decides the winner with
:func:`~pokebattle.domain.battle.pick_winner_weighted` and persists the
outcome: the winner gains a level, the loser drops one and is removed from
storage when it reaches zero.

The service performs no transaction handling of its own. Callers run
:meth:`BattleService.battle` through
:func:`~pokebattle.transaction.transactional` so the winner update and the
loser update or deletion commit together or not at all.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, replace

from pokebattle.domain.battle import pick_winner_weighted
from pokebattle.domain.errors import InvalidOperationError, PokemonNotFoundError
from pokebattle.domain.models import Pokemon, PokemonID
from pokebattle.interfaces import IPokemonRepository
from pokebattle.utils.rng import RandomSource

logger = logging.getLogger(__name__)

LEVEL_GAIN = 1
LEVEL_LOSS = 1


@dataclass(frozen=True, slots=True)
class BattleResult:
    """Post-battle state of both combatants.

    A loser removed from storage is reported with level 0.
    """

    winner: Pokemon
    loser: Pokemon


class BattleService:
    """Service resolving battles between stored Pokemon."""

    def __init__(self, repository: IPokemonRepository, rng: RandomSource | None = None):
        self.repository = repository
        self.rng = rng

    async def battle(self, pokemon_a_id: PokemonID, pokemon_b_id: PokemonID) -> BattleResult:
        """Run one battle between two stored Pokemon.

        Args:
            pokemon_a_id: Identifier of the first combatant
            pokemon_b_id: Identifier of the second combatant

        Returns:
            BattleResult with updated levels

        Raises:
            InvalidOperationError: If both identifiers are equal
            PokemonNotFoundError: If either identifier does not resolve
        """
        if pokemon_a_id == pokemon_b_id:
            raise InvalidOperationError("Cannot battle the same pokemon")

        loaded = await asyncio.gather(
            self.repository.load_by_id(pokemon_a_id),
            self.repository.load_by_id(pokemon_b_id),
            return_exceptions=True,
        )
        # Both loads have finished here; surface the first failure unchanged.
        for outcome in loaded:
            if isinstance(outcome, BaseException):
                raise outcome
        pokemon_a, pokemon_b = loaded
        if pokemon_a is None:
            raise PokemonNotFoundError(pokemon_a_id)
        if pokemon_b is None:
            raise PokemonNotFoundError(pokemon_b_id)

        matchup = pick_winner_weighted(pokemon_a, pokemon_b, self.rng)
        winner, loser = matchup.winner, matchup.loser

        new_winner_level = winner.level + LEVEL_GAIN
        new_loser_level = loser.level - LEVEL_LOSS

        await self.repository.update_level(winner.id, new_winner_level)

        if new_loser_level <= 0:
            await self.repository.delete_by_id(loser.id)
            new_loser_level = 0
            logger.info("pokemon %s fainted for good and was removed", int(loser.id))
        else:
            await self.repository.update_level(loser.id, new_loser_level)

        logger.info(
            "battle %s vs %s: winner=%s (level %d), loser=%s (level %d)",
            int(pokemon_a_id),
            int(pokemon_b_id),
            int(winner.id),
            new_winner_level,
            int(loser.id),
            new_loser_level,
        )
        return BattleResult(
            winner=replace(winner, level=new_winner_level),
            loser=replace(loser, level=new_loser_level),
        )
