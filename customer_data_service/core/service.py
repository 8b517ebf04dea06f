"""
Customer data service.

Business operations on the customer database. Persistence errors are
translated into the domain errors of ``customer_data_service.core.errors``
and every operation is counted and timed.
"""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .database.entities.customers import Customer
from .database.repositories.customers import CustomerRepository
from .errors import CustomerDataNotFoundError, CustomerDataServiceError, CustomerEmailExistsError
from .logging_config import get_logger
from .metrics import instrumented, record_operation_error
from .models.io.customers import CustomerPayload

logger = get_logger(__name__)


class CustomerDataService:
    """Perform data related operations on the customer database."""

    def __init__(self, session: AsyncSession, repository: Optional[CustomerRepository] = None) -> None:
        self.session = session
        self.repository = repository or CustomerRepository(session)

    @instrumented("savecustomer")
    async def save_customer(self, customer: CustomerPayload) -> Customer:
        """Create a new customer from the passed information.

        Any id in the payload is ignored; a new id is always generated.

        Raises:
            CustomerEmailExistsError: The e-mail address is already used.
            CustomerDataServiceError: Any other persistence failure.
        """
        entity = Customer(
            first_name=customer.first_name,
            middle_name=customer.middle_name,
            last_name=customer.last_name,
            email_address=customer.email_address,
            phone_number=customer.phone_number,
        )
        try:
            created = await self.repository.create(entity)
        except IntegrityError as e:
            # The e-mail is the only constraint that can be violated here
            record_operation_error("savecustomer", "emailexists")
            raise CustomerEmailExistsError(customer.email_address) from e
        except SQLAlchemyError as e:
            record_operation_error("savecustomer", "exception")
            raise CustomerDataServiceError("Failed to save customer") from e
        logger.debug(f"Created customer {created.id}")
        return created

    @instrumented("fetchcustomers")
    async def fetch_customer_list(self, limit: Optional[int] = None, offset: Optional[int] = None) -> List[Customer]:
        """Fetch the current list of customers."""
        return await self.repository.list(limit=limit, offset=offset)

    @instrumented("findcustomer.byemail")
    async def find_customer_by_email(self, email: str) -> Optional[Customer]:
        return await self.repository.get_by_email(email)

    @instrumented("findcustomer.byid")
    async def find_customer_by_id(self, customer_id: UUID) -> Optional[Customer]:
        return await self.repository.get_by_id(customer_id)

    @instrumented("updatecustomer")
    async def update_customer(self, customer: CustomerPayload) -> Customer:
        """Overwrite an existing customer with the passed information.

        First, middle and last name, e-mail and phone number are replaced;
        a missing middle name clears the stored one.

        Raises:
            CustomerDataNotFoundError: No customer has the payload id.
            CustomerEmailExistsError: The new e-mail address belongs to another customer.
            CustomerDataServiceError: Any other persistence failure.
        """
        existing = await self.repository.get_by_id(customer.id)
        if existing is None:
            logger.error(f"Customer with id {customer.id} not found")
            record_operation_error("updatecustomer", "customernotfound")
            raise CustomerDataNotFoundError(customer.id)

        existing.first_name = customer.first_name
        existing.middle_name = customer.middle_name
        existing.last_name = customer.last_name
        existing.email_address = customer.email_address
        existing.phone_number = customer.phone_number

        try:
            return await self.repository.update(existing)
        except IntegrityError as e:
            record_operation_error("updatecustomer", "emailexists")
            raise CustomerEmailExistsError(customer.email_address) from e
        except SQLAlchemyError as e:
            record_operation_error("updatecustomer", "exception")
            raise CustomerDataServiceError(f"Failed to update customer {customer.id}") from e

    @instrumented("deletecustomer")
    async def delete_customer_by_id(self, customer_id: UUID) -> None:
        """Delete a customer; unknown ids are ignored."""
        deleted = await self.repository.delete(customer_id)
        if not deleted:
            logger.debug(f"Delete requested for unknown customer {customer_id}")
