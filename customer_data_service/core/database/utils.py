"""
Database utility functions for engine and session management.

Functions:
- create_engine: Creates async SQLAlchemy engine with URL normalization
- create_sessionmaker: Creates async session factory with safe defaults
- create_all: Creates all tables from ORM metadata
- check_connection: Runs a trivial query to verify the database is reachable
- to_config_option: Escapes a URL for the Alembic ini config
- ConnectionGuard: Serializes sessions of engines backed by a single shared connection
"""

from __future__ import annotations

import asyncio
import re
import weakref
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from .base import Base


def _is_in_memory_sqlite(url: str) -> bool:
    return url.startswith("sqlite") and (":memory:" in url or url.rstrip("/").endswith("sqlite+aiosqlite:"))


def create_engine(db_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async SQLAlchemy engine.

    Postgres URLs are normalized to the async driver: ``postgresql://`` and
    other variants are rewritten to ``postgresql+asyncpg://``. In-memory SQLite
    URLs share a single connection so every session sees the same database.

    Args:
        db_url: Database connection URL
        echo: Log every emitted SQL statement

    Returns:
        Configured AsyncEngine instance
    """
    if _is_in_memory_sqlite(db_url):
        return create_async_engine(
            db_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    url = re.sub(r"^postgres(?:ql)?(?:\+[a-z0-9_]+)?://", "postgresql+asyncpg://", db_url, count=1)
    return create_async_engine(url, echo=echo, pool_pre_ping=True)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create an ``async_sessionmaker`` with safe defaults for this project.

    Args:
        engine: Async SQLAlchemy engine

    Returns:
        Configured async session factory
    """
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_all(engine: AsyncEngine) -> None:
    """Create all tables for the current ORM metadata.

    Existing tables are left untouched. Persistent databases are expected to be
    managed with the Alembic migrations instead.

    Args:
        engine: Async SQLAlchemy engine
    """
    # Register entity tables on the metadata
    from . import entities  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


def to_config_option(value: str) -> str:
    """Escape ``value`` for an ini option read with configparser interpolation (Alembic).

    URL-encoded passwords contain ``%``, which configparser treats as interpolation.
    """
    return value.replace("%", "%%")


async def check_connection(engine: AsyncEngine) -> bool:
    """Return True when a trivial query succeeds against ``engine``."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except (SQLAlchemyError, OSError):
        return False


class ConnectionGuard:
    """Serialize database work on an engine whose sessions share one connection.

    In-memory SQLite runs on a ``StaticPool``: every session uses the same
    connection, so two interleaved sessions would commit, roll back and reset
    each other's transactions. ``hold()`` lets one session at a time use such an
    engine. Engines with a real connection pool are not guarded.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self.enabled = isinstance(engine.sync_engine.pool, StaticPool)
        # asyncio.Lock is bound to the loop it first waits on
        self._locks: "weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, asyncio.Lock]" = (
            weakref.WeakKeyDictionary()
        )

    def _lock(self) -> asyncio.Lock:
        loop = asyncio.get_running_loop()
        lock = self._locks.get(loop)
        if lock is None:
            lock = self._locks[loop] = asyncio.Lock()
        return lock

    @asynccontextmanager
    async def hold(self) -> AsyncIterator[None]:
        if not self.enabled:
            yield
            return
        async with self._lock():
            yield
