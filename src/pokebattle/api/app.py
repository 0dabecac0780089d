"""FastAPI application wiring for Pokebattle."""

from __future__ import annotations

from collections.abc import Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pokebattle import __version__
from pokebattle.api import routes
from pokebattle.api.errors import unhandled_error_handler
from pokebattle.api.runtime import ApiState, build_state
from pokebattle.config import get_settings


def create_app(*, state_factory: Callable[[], ApiState] = build_state) -> FastAPI:
    """Instantiate the FastAPI application with routing and lifecycle hooks."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        state = state_factory()
        await state.startup()
        app.state.api_state = state
        try:
            yield
        finally:
            await state.shutdown()

    settings = get_settings()
    app = FastAPI(
        title="Pokebattle API",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(Exception, unhandled_error_handler)
    app.include_router(routes.router)
    return app


app = create_app()
