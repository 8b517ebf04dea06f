"""
Customer repository implementation.

This module provides data access operations for customer records,
including lookups by id and by e-mail address. Built on SQLModel for
type-safe ORM operations.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.customers import Customer
from .base import AsyncBaseRepository, QueryBuilder


class CustomerRepository(AsyncBaseRepository[Customer]):
    """Repository for customer data access operations using SQLModel.

    Write operations roll the session back before re-raising any SQLAlchemy
    error, so the session stays usable after a constraint violation.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Customer)

    async def _commit(self, customer: Customer) -> Customer:
        self.session.add(customer)
        try:
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        await self.session.refresh(customer)
        return customer

    async def create(self, customer: Customer) -> Customer:
        """Insert a new customer.

        Raises:
            sqlalchemy.exc.IntegrityError: The e-mail address is already in use.
        """
        return await self._commit(customer)

    async def get_by_id(self, customer_id: UUID) -> Optional[Customer]:
        stmt = select(Customer).where(Customer.id == customer_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[Customer]:
        """Get a customer by e-mail address, the other unique field besides the id."""
        stmt = select(Customer).where(Customer.email_address == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, customer: Customer) -> Customer:
        """Persist changes made to a loaded customer.

        Raises:
            sqlalchemy.exc.IntegrityError: The new e-mail address is already in use.
        """
        return await self._commit(customer)

    async def delete(self, customer_id: UUID) -> bool:
        customer = await self.get_by_id(customer_id)
        if customer is None:
            return False
        await self.session.delete(customer)
        try:
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        return True

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[Customer]:
        """List customers ordered by last name, first name and id.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Equality filters on customer fields (e.g. ``last_name``)

        Returns:
            List of Customer instances
        """
        stmt = select(Customer).order_by(Customer.last_name, Customer.first_name, Customer.id)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Customer, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())
