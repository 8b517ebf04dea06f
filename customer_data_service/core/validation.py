"""
Customer request validation.

Validates requests to the customer endpoints before they reach the service
layer. Every failure raises ``InvalidCustomerRequestError`` with a message
naming the offending field.
"""

from __future__ import annotations

from typing import Optional

from email_validator import EmailNotValidError, validate_email

from .errors import InvalidCustomerRequestError
from .models.io.customers import CustomerPayload


def _has_digits(name: Optional[str]) -> bool:
    return name is not None and any(ch.isdigit() for ch in name)


def _is_valid_name(name: Optional[str]) -> bool:
    return bool(name) and not _has_digits(name)


def validate_customer(customer: CustomerPayload, is_create: bool) -> None:
    """Validate a create (``is_create=True``) or update request.

    Checks run in order and the first failing check raises:
    id (updates only), first name, last name, e-mail, phone number.
    The middle name is not validated.
    """
    if customer.id is None and not is_create:
        raise InvalidCustomerRequestError("Invalid customer Id provided")

    if not _is_valid_name(customer.first_name):
        raise InvalidCustomerRequestError("Invalid first name provided")

    if not _is_valid_name(customer.last_name):
        raise InvalidCustomerRequestError("Invalid last name provided")

    validate_customer_email(customer.email_address)

    # TODO: validate the phone number format, not just its presence
    if not customer.phone_number:
        raise InvalidCustomerRequestError("Invalid phone number provided")


def validate_customer_email(email: Optional[str]) -> None:
    """Check that ``email`` is a syntactically valid address.

    Deliverability (DNS) is not checked.
    """
    if not email:
        raise InvalidCustomerRequestError("Invalid email address provided")
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError as e:
        raise InvalidCustomerRequestError("Invalid email address provided") from e
