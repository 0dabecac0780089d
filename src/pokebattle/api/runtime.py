"""Runtime primitives backing the Pokebattle HTTP API."""

from __future__ import annotations

import asyncio
import logging
import time

from pokebattle.config import Settings, get_settings
from pokebattle.database import (
    check_database_health,
    create_db_engine,
    create_session_factory,
    init_db,
)
from pokebattle.transaction import SqlUnitOfWork
from pokebattle.utils.rng import RandomSource, source_for

logger = logging.getLogger(__name__)


class ApiState:
    """Process-level resources shared by the FastAPI layer.

    Owns the engine and session factory. Units of work are handed out per
    request through :meth:`unit_of_work`.
    """

    def __init__(
        self, *, settings: Settings | None = None, rng: RandomSource | None = None
    ) -> None:
        self.settings = settings or get_settings()
        self.engine = create_db_engine(self.settings)
        self.session_factory = create_session_factory(self.engine)
        self.rng = rng if rng is not None else source_for(self.settings.battle_seed)
        self.started_at = time.monotonic()

    @property
    def uptime_seconds(self) -> float:
        return round(time.monotonic() - self.started_at, 2)

    def unit_of_work(self) -> SqlUnitOfWork:
        """Return a fresh, unopened unit of work."""

        return SqlUnitOfWork(self.session_factory)

    async def database_healthy(self) -> bool:
        return await asyncio.to_thread(check_database_health, self.engine)

    async def startup(self) -> None:
        await asyncio.to_thread(init_db, self.engine)
        logger.info("database ready at %s", self.engine.url.render_as_string(hide_password=True))

    async def shutdown(self) -> None:
        await asyncio.to_thread(self.engine.dispose)


def build_state() -> ApiState:
    """Factory used by the API to initialize state."""

    return ApiState()
