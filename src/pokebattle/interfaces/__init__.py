"""Protocol-based interfaces for Pokebattle collaborators.

Use cases depend on these protocols rather than on SQLAlchemy, so they can
be exercised with in-memory fakes.
"""

from pokebattle.interfaces.repository import IPokemonRepository
from pokebattle.interfaces.transaction import IUnitOfWork

__all__ = [
    "IPokemonRepository",
    "IUnitOfWork",
]
