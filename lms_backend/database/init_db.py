"""
Engine and session lifecycle for SQL storage.

One async engine and one session factory live at module level between
``initialize_database`` and ``close_database``. ``create_schema`` is used by
tests and the init script; deployed databases are migrated with Alembic.
"""

from typing import Any, Dict, Optional
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from lms_backend.common.logger import app_logger
from lms_backend.database.base import Base
from lms_backend.database import models  # noqa: F401  registers the tables

logger = app_logger.getChild("database.init_db")

_engine: Optional[AsyncEngine] = None
_session_factory: Optional[sessionmaker] = None

NOT_INITIALIZED = "Database engine not initialized. Call initialize_database() first."


def get_engine() -> AsyncEngine:
    if _engine is None:
        raise RuntimeError(NOT_INITIALIZED)
    return _engine


def get_session_factory() -> sessionmaker:
    """Session factory bound to the current engine; sessions keep objects usable after commit."""
    if _session_factory is None:
        raise RuntimeError(NOT_INITIALIZED)
    return _session_factory


def get_engine_kwargs(
    database_url: str,
    echo: bool = False,
    pool_size: int = 5,
    max_overflow: int = 10,
    pool_timeout: int = 30,
) -> Dict[str, Any]:
    """
    Engine options for a database URL.

    Pool sizing applies to PostgreSQL only. SQLite keeps the pool its async
    dialect picks, which for an in-memory database shares one connection.
    """
    kwargs: Dict[str, Any] = {"echo": echo}
    if database_url.startswith("postgresql"):
        kwargs.update(
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_timeout=pool_timeout,
            pool_pre_ping=True,
            pool_recycle=300,
        )
    return kwargs


async def initialize_database(database_url: str, **engine_options: Any) -> AsyncEngine:
    """
    Create the engine and session factory, then check the connection.

    Args:
        database_url: SQLAlchemy async URL, e.g. ``sqlite+aiosqlite:///./lms.db``
        **engine_options: ``echo``, ``pool_size``, ``max_overflow`` and ``pool_timeout``
            as accepted by ``get_engine_kwargs``

    Returns:
        The new engine

    Raises:
        Exception: Whatever the driver raises when the database is unreachable
    """
    global _engine, _session_factory

    scheme = database_url.split("://", 1)[0]
    logger.info(f"Connecting to {scheme} database")

    _engine = create_async_engine(database_url, **get_engine_kwargs(database_url, **engine_options))
    _session_factory = sessionmaker(_engine, class_=AsyncSession, expire_on_commit=False)

    try:
        async with _engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Database at {scheme} is unreachable: {e}")
        await close_database()
        raise

    logger.info("Database engine ready")
    return _engine


async def create_schema(engine: Optional[AsyncEngine] = None) -> None:
    """Create all tables that do not exist yet."""
    async with (engine or get_engine()).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema created")


async def close_database() -> None:
    """Dispose of the engine; a no-op when none is open."""
    global _engine, _session_factory

    engine, _engine, _session_factory = _engine, None, None
    if engine is not None:
        await engine.dispose()
        logger.info("Database engine closed")
