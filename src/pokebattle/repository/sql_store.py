"""SQLAlchemy-backed Pokemon repository."""

from __future__ import annotations

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from pokebattle.domain import models as dm
from pokebattle.domain.enums import Species
from pokebattle.models import PokemonRow
from pokebattle.transaction import SqlUnitOfWork


def _to_domain(row: PokemonRow) -> dm.Pokemon:
    return dm.Pokemon(
        id=dm.PokemonID(row.id),
        species=Species(row.species),
        trainer=row.trainer,
        level=row.level,
    )


class SqlPokemonRepository:
    """Store Pokemon in the ``pokemons`` table.

    Every call runs on the session of ``unit_of_work``, which must be open.
    With ``lock_rows`` set, :meth:`load_by_id` issues ``SELECT ... FOR UPDATE``
    so concurrent battles over the same Pokemon serialize on backends that
    support row locks.
    """

    def __init__(self, unit_of_work: SqlUnitOfWork, *, lock_rows: bool = False) -> None:
        self._uow = unit_of_work
        self._lock_rows = lock_rows

    async def create(self, species: Species, trainer: str) -> dm.Pokemon:
        """Insert a Pokemon at the starting level and return it."""

        def _create(session: Session) -> dm.Pokemon:
            row = PokemonRow(species=str(species), trainer=trainer, level=dm.STARTING_LEVEL)
            session.add(row)
            session.flush()
            return _to_domain(row)

        return await self._uow.run(_create)

    async def load_by_id(self, pokemon_id: dm.PokemonID) -> dm.Pokemon | None:
        """Return the Pokemon or ``None`` if no row matches."""

        def _load(session: Session) -> dm.Pokemon | None:
            stmt = select(PokemonRow).where(PokemonRow.id == int(pokemon_id))
            if self._lock_rows:
                stmt = stmt.with_for_update()
            row = session.execute(stmt).scalar_one_or_none()
            return _to_domain(row) if row is not None else None

        return await self._uow.run(_load)

    async def list_all(self) -> list[dm.Pokemon]:
        """Return every Pokemon ordered by identifier."""

        def _list(session: Session) -> list[dm.Pokemon]:
            rows = session.execute(select(PokemonRow).order_by(PokemonRow.id)).scalars()
            return [_to_domain(row) for row in rows]

        return await self._uow.run(_list)

    async def update_trainer(self, pokemon_id: dm.PokemonID, trainer: str) -> None:
        await self._uow.run(self._update, pokemon_id, {"trainer": trainer})

    async def update_level(self, pokemon_id: dm.PokemonID, level: int) -> None:
        await self._uow.run(self._update, pokemon_id, {"level": level})

    async def delete_by_id(self, pokemon_id: dm.PokemonID) -> None:
        def _delete(session: Session) -> None:
            session.execute(delete(PokemonRow).where(PokemonRow.id == int(pokemon_id)))

        await self._uow.run(_delete)

    @staticmethod
    def _update(session: Session, pokemon_id: dm.PokemonID, values: dict[str, object]) -> None:
        session.execute(
            update(PokemonRow).where(PokemonRow.id == int(pokemon_id)).values(**values)
        )
