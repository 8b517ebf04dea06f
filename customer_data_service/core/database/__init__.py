"""
Database layer for the customer data service.

Structure:
- entities/: Database entity models
- repositories/: Data access layer
- session.py: Global engine and session factory management
- utils.py: Database utility functions (engine, session factory, table creation)
"""

from .base import Base
from .session import (
    async_session_maker,
    engine,
    get_session,
    init_db,
    session_guard,
)
from .utils import (
    ConnectionGuard,
    check_connection,
    create_all,
    create_engine,
    create_sessionmaker,
)

__all__ = [
    "Base",
    "ConnectionGuard",
    "async_session_maker",
    "check_connection",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "engine",
    "get_session",
    "init_db",
    "session_guard",
]
