"""Error types for the customer data service.

Defines a small hierarchy of exceptions raised by the validation and service
layers to signal invalid requests, missing customers, e-mail conflicts and
unexpected persistence failures.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID


class CustomerDataServiceError(Exception):
    """Raised when an operation in the customer data service layer fails unexpectedly.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, message: str = "Customer data service operation failed") -> None:
        super().__init__(message)


class CustomerDataNotFoundError(CustomerDataServiceError):
    """Raised when customer information is not present in the database."""

    def __init__(self, customer_id: Optional[UUID] = None) -> None:
        self.customer_id = customer_id
        super().__init__(f"Customer not found: '{customer_id}'")


class CustomerEmailExistsError(CustomerDataServiceError):
    """Raised when the e-mail of a created or updated customer is already used by another account."""

    def __init__(self, email: Optional[str] = None) -> None:
        self.email = email
        super().__init__(f"Customer email already exists: '{email}'")


class InvalidCustomerRequestError(ValueError):
    """Raised when a customer request fails validation."""
