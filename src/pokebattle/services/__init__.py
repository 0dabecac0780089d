"""Service layer for Pokebattle.

Services depend on the protocol interfaces in :mod:`pokebattle.interfaces`:

- BattleService: weighted battle between two stored Pokemon
- PokemonService: create, read, list, update trainer, delete

Production Usage:
    from pokebattle.factory import create_battle_service
    service = create_battle_service(uow, rng=rng)
    result = await transactional(service.battle, uow)(1, 2)

Testing Usage:
    from pokebattle.services.battle_service import BattleService

    class FakeRepository:
        async def load_by_id(self, pokemon_id):
            ...

    service = BattleService(FakeRepository(), rng=random.Random(7))
"""

from pokebattle.services.battle_service import BattleResult, BattleService
from pokebattle.services.pokemon_service import PokemonService

__all__ = [
    "BattleResult",
    "BattleService",
    "PokemonService",
]
