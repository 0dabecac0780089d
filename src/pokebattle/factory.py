"""Service Factory for Pokebattle.

Factory functions wiring services to the SQL repository of a unit of work.
For testing, construct services directly with protocol-based fakes.

Example:
    uow = SqlUnitOfWork(session_factory)
    service = create_battle_service(uow, rng=seeded_source("demo"))
    result = await transactional(service.battle, uow)(1, 2)
"""

from pokebattle.repository import SqlPokemonRepository
from pokebattle.services.battle_service import BattleService
from pokebattle.services.pokemon_service import PokemonService
from pokebattle.transaction import SqlUnitOfWork
from pokebattle.utils.rng import RandomSource


def create_pokemon_service(unit_of_work: SqlUnitOfWork) -> PokemonService:
    """Create a PokemonService bound to ``unit_of_work``.

    Args:
        unit_of_work: Unit of work whose session the repository uses

    Returns:
        Fully initialized PokemonService
    """
    return PokemonService(SqlPokemonRepository(unit_of_work))


def create_battle_service(
    unit_of_work: SqlUnitOfWork,
    *,
    rng: RandomSource | None = None,
    lock_rows: bool = False,
) -> BattleService:
    """Create a BattleService bound to ``unit_of_work``.

    Args:
        unit_of_work: Unit of work whose session the repository uses
        rng: Random source for winner selection, ambient when omitted
        lock_rows: Load combatants with ``SELECT ... FOR UPDATE``

    Returns:
        Fully initialized BattleService
    """
    repository = SqlPokemonRepository(unit_of_work, lock_rows=lock_rows)
    return BattleService(repository, rng=rng)
