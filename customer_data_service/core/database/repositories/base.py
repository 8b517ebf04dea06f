"""
Repository contract shared by the customer data access layer.

``AsyncBaseRepository`` fixes the CRUD surface a repository offers over one
SQLModel table; ``QueryBuilder`` holds the select-statement helpers for
filtered and paginated listings.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

EntityType = TypeVar("EntityType", bound=SQLModel)


class AsyncBaseRepository(ABC, Generic[EntityType]):
    """CRUD operations over a single table, bound to one ``AsyncSession``.

    Write operations commit on their own; callers do not manage transactions.
    """

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        self.session = session
        self.model = model

    @abstractmethod
    async def create(self, entity: EntityType) -> EntityType:
        """Insert ``entity`` and return it with database defaults loaded."""

    @abstractmethod
    async def get_by_id(self, entity_id: UUID) -> Optional[EntityType]:
        """Return the row with primary key ``entity_id``, or None."""

    @abstractmethod
    async def update(self, entity: EntityType) -> EntityType:
        """Write the changed attributes of a loaded ``entity``."""

    @abstractmethod
    async def delete(self, entity_id: UUID) -> bool:
        """Remove the row with primary key ``entity_id``.

        Returns:
            False when no such row exists
        """

    @abstractmethod
    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[EntityType]:
        """Return rows in a stable order, optionally filtered by column equality and paginated."""


class QueryBuilder:
    """Helpers that extend a ``select()`` statement."""

    @staticmethod
    def apply_filters(stmt, model: Type[EntityType], filters: Dict[str, Any]):
        """Add ``column == value`` clauses; unknown columns and None values are skipped."""
        for key, value in filters.items():
            if value is not None and hasattr(model, key):
                stmt = stmt.where(getattr(model, key) == value)
        return stmt

    @staticmethod
    def apply_pagination(stmt, limit: Optional[int], offset: Optional[int]):
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return stmt
