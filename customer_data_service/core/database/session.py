"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
that are used throughout the application for database access.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from customer_data_service.core.logging_config import get_logger
from customer_data_service.server.core.config import settings

from .utils import ConnectionGuard, create_all, create_engine, create_sessionmaker

logger = get_logger(__name__)

# Create global engine and session factory
engine = create_engine(settings.database.url, echo=settings.database.echo)
async_session_maker = create_sessionmaker(engine)
session_guard = ConnectionGuard(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Sessions are serialized when the engine shares a single connection
    (in-memory SQLite).

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with session_guard.hold():
        async with async_session_maker() as session:
            yield session


async def init_db() -> None:
    """
    Initialize the database.

    Creates the customer table when it does not exist yet. Persistent databases
    should be migrated with Alembic; this keeps the default in-memory database usable.
    """
    await create_all(engine)
    logger.debug(f"Database tables ensured for {engine.url.render_as_string(hide_password=True)}")
