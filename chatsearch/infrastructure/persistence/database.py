"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

Schema is managed by Alembic migrations (see migrations/versions).

Engine and session factory are created lazily on first use so import does
not trigger Settings validation. One engine (one connection pool) exists
per process; it is disposed by the application lifespan on shutdown.
"""

import logging
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from chatsearch.core.config import get_settings

logger = logging.getLogger(__name__)

# Set by _ensure_engine() on first use; avoids get_settings() at import time.
engine: AsyncEngine | None = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None


def _ensure_engine() -> async_sessionmaker[AsyncSession]:
    """Create engine and AsyncSessionLocal on first use and return the factory.

    Settings validation guarantees DATABASE_URL is set.
    """
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is not None:
        return AsyncSessionLocal
    settings = get_settings()
    pool_size = settings.db_pool_size if settings.db_pool_size is not None else 10
    max_overflow = (
        settings.db_max_overflow if settings.db_max_overflow is not None else 20
    )
    command_timeout = (
        settings.db_command_timeout
        if settings.db_command_timeout is not None
        else 30
    )
    connect_args: dict[str, Any] = {}
    if "asyncpg" in settings.database_url:
        connect_args["command_timeout"] = command_timeout
        connect_args["server_settings"] = {"jit": "off"}
    engine = create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_recycle=3600,
        connect_args=connect_args,
    )
    AsyncSessionLocal = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )
    return AsyncSessionLocal


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


def get_engine() -> AsyncEngine:
    """Return the process-wide engine, creating it on first use."""
    _ensure_engine()
    assert engine is not None
    return engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Return the process-wide session factory, creating it on first use.

    Repositories hold this factory and open one short-lived session per
    query, so independent queries may run concurrently on separate
    pooled connections.
    """
    return _ensure_engine()


async def ping_database() -> None:
    """Run SELECT 1 on a pooled connection. Raises on failure."""
    async with get_session_factory()() as session:
        await session.execute(text("SELECT 1"))


async def dispose_engine() -> None:
    """Close all pooled connections and forget the engine."""
    global engine, AsyncSessionLocal
    if engine is not None:
        await engine.dispose()
        logger.info("Database engine disposed")
    engine = None
    AsyncSessionLocal = None
