"""Domain layer for Pokebattle.

Everything here operates purely in-memory:

* The :class:`~pokebattle.domain.models.Pokemon` dataclass and its identifier type.
* The closed set of species (see :mod:`enums`).
* The weighted winner selection rule (see :mod:`battle`).
* Domain error types (see :mod:`errors`).

Persistence and transport adapters translate to and from these types.
"""

from . import battle, enums, errors, models

__all__ = [
    "battle",
    "enums",
    "errors",
    "models",
]
