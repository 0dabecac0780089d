"""Pokemon table.

Rules reflected in the schema:

- ``species`` only accepts the values of :class:`~pokebattle.domain.enums.Species`
- ``level`` starts at 1 and can never be negative
- identifiers are never reused once a row is deleted
"""

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pokebattle.domain.enums import Species
from pokebattle.domain.models import STARTING_LEVEL

from .base import Base, TimestampMixin

_SPECIES_SQL = ", ".join(f"'{species.value}'" for species in Species)


class PokemonRow(Base, TimestampMixin):
    """Persisted Pokemon.

    Attributes:
        id: Primary key, assigned by the database
        species: One of the allowed species
        trainer: Name of the trainer owning this Pokemon
        level: Battle strength, removed from storage when it reaches zero
    """

    __tablename__ = "pokemons"
    __table_args__ = (
        CheckConstraint(f"species IN ({_SPECIES_SQL})", name="ck_pokemons_species"),
        CheckConstraint("level >= 0", name="ck_pokemons_level_non_negative"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    species: Mapped[str] = mapped_column(String(50), nullable=False)
    trainer: Mapped[str] = mapped_column(String(255), nullable=False)
    level: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=STARTING_LEVEL,
        server_default=str(STARTING_LEVEL),
    )

    def __repr__(self) -> str:
        return f"<PokemonRow(id={self.id}, species='{self.species}', level={self.level})>"
