"""Transactional unit of work backed by a SQLAlchemy session.

A :class:`SqlUnitOfWork` owns exactly one session between ``open`` and
``release``. Repositories built on it route their blocking ORM calls through
:meth:`SqlUnitOfWork.run`, which executes them on a worker thread dedicated
to that unit. Calls run one at a time in submission order, so an operation
may ``asyncio.gather`` several repository calls, and a call interrupted by
cancellation finishes before the rollback queued after it starts.

:func:`transactional` wraps any async operation in the
open / commit-or-rollback / release lifecycle.
"""

from __future__ import annotations

import asyncio
import functools
import logging
from collections.abc import Awaitable, Callable
from concurrent.futures import ThreadPoolExecutor
from typing import ParamSpec, TypeVar

from sqlalchemy.orm import Session, sessionmaker

from pokebattle.interfaces import IUnitOfWork

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")


class TransactionNotFoundError(RuntimeError):
    """The unit of work was used before ``open`` or after ``release``."""

    def __init__(self) -> None:
        super().__init__("No transaction found. Did you call open()?")


class TransactionAlreadyOpenError(RuntimeError):
    """``open`` was called on a unit of work that is already open."""

    def __init__(self) -> None:
        super().__init__("Transaction already open. Call release() before reopening.")


class SqlUnitOfWork:
    """Unit of work holding one SQLAlchemy session per transaction.

    Each open unit gets a single-thread executor of its own. Units waiting on
    a database lock therefore never occupy the threads other units need to
    finish and release that lock.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None
        self._executor: ThreadPoolExecutor | None = None

    @property
    def is_open(self) -> bool:
        return self._session is not None

    @property
    def session(self) -> Session:
        """The active session.

        Raises:
            TransactionNotFoundError: If the unit of work is not open
        """
        if self._session is None:
            raise TransactionNotFoundError()
        return self._session

    async def run(self, fn: Callable[..., T], *args: object) -> T:
        """Call ``fn(session, *args)`` on the unit's worker thread."""

        session = self.session
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, functools.partial(fn, session, *args))

    async def open(self) -> None:
        if self._session is not None:
            raise TransactionAlreadyOpenError()
        session = self._session_factory()
        session.begin()
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="pokebattle-uow")
        self._session = session

    async def commit(self) -> None:
        await self.run(Session.commit)

    async def rollback(self) -> None:
        await self.run(Session.rollback)

    async def release(self) -> None:
        session = self._session
        if session is None:
            return
        executor, self._executor = self._executor, None
        self._session = None
        try:
            await asyncio.get_running_loop().run_in_executor(executor, session.close)
        finally:
            executor.shutdown(wait=False)


def transactional(
    operation: Callable[P, Awaitable[T]],
    unit_of_work: IUnitOfWork,
) -> Callable[P, Awaitable[T]]:
    """Return ``operation`` wrapped in an all-or-nothing unit of work.

    The wrapper opens the unit of work, awaits the operation, commits on
    success, rolls back on any failure and re-raises it unchanged. The unit
    is released whenever it was opened.

    Example:
        ```python
        battle = transactional(service.battle, uow)
        result = await battle(pokemon_a_id, pokemon_b_id)
        ```
    """
    name = getattr(operation, "__qualname__", repr(operation))

    @functools.wraps(operation)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        await unit_of_work.open()
        try:
            result = await operation(*args, **kwargs)
            await unit_of_work.commit()
            return result
        except BaseException as exc:
            logger.warning("rolling back %s after %s", name, type(exc).__name__)
            await unit_of_work.rollback()
            raise
        finally:
            await unit_of_work.release()

    return wrapper
