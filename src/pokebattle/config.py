"""Application settings for the Pokebattle API."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pokebattle import __version__


class Settings(BaseSettings):
    """Settings read from the environment and an optional ``.env`` file."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_version: str = Field(default=__version__, description="Version reported by /healthz")
    debug: bool = Field(default=False, description="Serve tracebacks instead of generic 500s")
    log_level: str = Field(default="INFO", description="Root logging level for the entrypoint")

    database_url: str = Field(
        default="sqlite:///./pokebattle.db", description="SQLAlchemy database URL"
    )
    database_echo: bool = Field(default=False, description="Echo emitted SQL to the log")
    database_pool_size: int = Field(default=20, ge=1, description="Pool size (non-SQLite only)")
    database_max_overflow: int = Field(default=10, ge=0, description="Extra connections allowed")
    database_pool_recycle: int = Field(
        default=1800, description="Seconds after which pooled connections are recycled"
    )
    database_pool_timeout: float = Field(
        default=2.0, gt=0.0, description="Seconds to wait for a pooled connection"
    )
    sqlite_busy_timeout: float = Field(
        default=30.0, gt=0.0, description="Seconds a SQLite writer waits for the database lock"
    )

    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"],
        description="Origins allowed to call the HTTP API",
    )

    battle_seed: str | None = Field(
        default=None, description="Seed string making battle outcomes reproducible"
    )
    battle_lock_rows: bool = Field(
        default=False,
        description="Load combatants with SELECT ... FOR UPDATE while battling",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
