"""Unit of Work Protocol Interface."""

from typing import Protocol


class IUnitOfWork(Protocol):
    """Protocol for an all-or-nothing transactional boundary.

    Lifecycle per call: ``open`` once, then exactly one of ``commit`` or
    ``rollback``, then ``release`` regardless of outcome.
    """

    async def open(self) -> None:
        """Begin a transaction."""
        ...

    async def commit(self) -> None:
        """Make every change performed since ``open`` visible."""
        ...

    async def rollback(self) -> None:
        """Discard every change performed since ``open``."""
        ...

    async def release(self) -> None:
        """Return the underlying connection; safe to call after a failure."""
        ...
