"""Database engine and session management.

This module builds the SQLAlchemy engine and session factory from
:class:`~pokebattle.config.Settings`. Nothing here is a process-wide
singleton: the API runtime owns the engine for its lifetime and hands a
fresh unit of work to every request.
"""

import logging
from typing import Any

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from pokebattle.config import Settings, get_settings
from pokebattle.models import Base

logger = logging.getLogger(__name__)

_IN_MEMORY_SQLITE_URLS = {"sqlite://", "sqlite:///:memory:"}


def _configure_sqlite_wal(
    dbapi_connection: Any, connection_record: Any  # noqa: ARG001
) -> None:
    """Configure SQLite to use WAL mode and enforce foreign keys.

    Also turns off the driver's own transaction handling so that
    :func:`_begin_immediate` decides how transactions start.

    Args:
        dbapi_connection: The DBAPI connection
        connection_record: Connection record (required by SQLAlchemy event API)
    """
    dbapi_connection.isolation_level = None
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA synchronous=NORMAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _begin_immediate(conn: Connection) -> None:
    """Take the SQLite write lock when a transaction starts.

    Every unit of work reads before it writes. A deferred transaction would
    upgrade its read snapshot to a write lock later and fail with
    ``database is locked`` when another writer committed in between. Starting
    with ``BEGIN IMMEDIATE`` makes writers queue on the busy timeout instead.
    """
    conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_db_engine(settings: Settings | None = None) -> Engine:
    """Create and configure the database engine.

    Args:
        settings: Settings to read the URL and pool options from, defaults
            to :func:`get_settings`

    Returns:
        Engine: Configured SQLAlchemy engine

    Note:
        Sessions are driven from worker threads, so SQLite connections are
        opened with ``check_same_thread=False``. In-memory SQLite shares a
        single connection so every session sees the same database. SQLite
        transactions start with ``BEGIN IMMEDIATE``.
    """
    settings = settings or get_settings()
    url = settings.database_url

    if url.startswith("sqlite"):
        options: dict[str, Any] = {
            "connect_args": {
                "check_same_thread": False,
                "timeout": settings.sqlite_busy_timeout,
            }
        }
        if url in _IN_MEMORY_SQLITE_URLS:
            options["poolclass"] = StaticPool
        engine = create_engine(
            url,
            echo=settings.database_echo,
            pool_pre_ping=True,
            **options,
        )
        event.listen(engine, "connect", _configure_sqlite_wal)
        event.listen(engine, "begin", _begin_immediate)
    else:
        # Non-SQLite (e.g., PostgreSQL): honor pool settings for production use
        engine = create_engine(
            url,
            echo=settings.database_echo,
            pool_pre_ping=True,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_recycle=settings.database_pool_recycle,
            pool_timeout=settings.database_pool_timeout,
        )

    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Return a session factory bound to ``engine``.

    Sessions do not expire attributes on commit so rows loaded inside a unit
    of work stay readable after it closes.
    """
    return sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )


def init_db(engine: Engine) -> None:
    """Create every table that does not exist yet."""

    Base.metadata.create_all(bind=engine)


def check_database_health(engine: Engine) -> bool:
    """Check if the database is accessible.

    Returns:
        bool: True if a trivial query succeeds, False otherwise
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception:
        logger.warning("database health check failed", exc_info=True)
        return False
