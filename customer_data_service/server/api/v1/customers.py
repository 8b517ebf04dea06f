"""
API endpoints for customer information workflows.

Maps the customer create / read / update / delete operations. New customers
are created with PUT and existing ones are updated with POST, both on
``/customer``.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, Response, status

from customer_data_service.core.errors import (
    CustomerDataNotFoundError,
    CustomerDataServiceError,
    CustomerEmailExistsError,
    InvalidCustomerRequestError,
)
from customer_data_service.core.logging_config import get_logger
from customer_data_service.core.models.io.customers import CustomerPayload, CustomerRead
from customer_data_service.core.validation import validate_customer, validate_customer_email
from customer_data_service.server.services.deps import CustomerDataServiceDep

logger = get_logger(__name__)

router = APIRouter(tags=["customers"])

CUSTOMER_NOT_FOUND = "Customer Not Found"


@router.get(
    "/customer",
    response_model=CustomerRead,
    summary="Get Customer by ID",
    description="Retrieve customer information by customer ID.",
    responses={
        200: {"description": "Customer found"},
        400: {"description": "Missing or malformed customer ID"},
        404: {"description": "Customer not found"},
    },
)
async def get_customer(
    service: CustomerDataServiceDep,
    customer_id: UUID = Query(alias="id"),
) -> CustomerRead:
    customer = await service.find_customer_by_id(customer_id)
    if customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CUSTOMER_NOT_FOUND)
    return CustomerRead.model_validate(customer)


@router.get(
    "/customerByEmail",
    response_model=CustomerRead,
    summary="Get Customer by E-mail",
    description="Retrieve customer information by the customer's e-mail address.",
    responses={
        200: {"description": "Customer found"},
        400: {"description": "Invalid e-mail address"},
        404: {"description": "Customer not found"},
    },
)
async def get_customer_by_email(
    service: CustomerDataServiceDep,
    email: str = Query(),
) -> CustomerRead:
    try:
        validate_customer_email(email)
    except InvalidCustomerRequestError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid email provided")

    customer = await service.find_customer_by_email(email)
    if customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CUSTOMER_NOT_FOUND)
    return CustomerRead.model_validate(customer)


@router.get(
    "/customers",
    response_model=list[CustomerRead],
    summary="List Customers",
    description="Retrieve all customers, optionally paginated. Mostly useful for data dumps and debugging.",
)
async def get_customers(
    service: CustomerDataServiceDep,
    limit: Optional[int] = Query(default=None, ge=1),
    offset: Optional[int] = Query(default=None, ge=0),
) -> list[CustomerRead]:
    customers = await service.fetch_customer_list(limit=limit, offset=offset)
    logger.debug(f"Retrieved {len(customers)} customers (limit={limit}, offset={offset})")
    return [CustomerRead.model_validate(customer) for customer in customers]


@router.post(
    "/customer",
    response_model=CustomerRead,
    status_code=status.HTTP_200_OK,
    summary="Update Customer",
    description="Replace the attributes of an existing customer. The whole customer object is expected.",
    responses={
        200: {"description": "Customer updated"},
        400: {"description": "Invalid arguments, unknown customer ID or e-mail already in use"},
        500: {"description": "Customer could not be updated"},
    },
)
async def update_customer(customer: CustomerPayload, service: CustomerDataServiceDep) -> CustomerRead:
    """
    Update a customer.

    Typically invoked by an account edit workflow where the customer edits one
    or more fields and the whole object is sent back.
    """
    try:
        validate_customer(customer, is_create=False)
        updated = await service.update_customer(customer)
    except InvalidCustomerRequestError as e:
        logger.error(f"Invalid arguments provided to update operation: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid arguments provided")
    except CustomerDataNotFoundError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Customer id not found")
    except CustomerEmailExistsError:
        logger.error(
            f"Exception while updating customer data with customer Id {customer.id}, "
            f"email: {customer.email_address} already exists"
        )
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Customer email already exists")
    except CustomerDataServiceError:
        logger.error(f"Exception while updating customer data with customer Id {customer.id}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error while trying to update customer"
        )
    return CustomerRead.model_validate(updated)


@router.put(
    "/customer",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Create Customer",
    description="Create a new customer from all required information (without a customer ID).",
    responses={
        200: {"description": "Customer created"},
        400: {"description": "Invalid arguments or e-mail already in use"},
        500: {"description": "Customer could not be created"},
    },
)
async def create_customer(customer: CustomerPayload, service: CustomerDataServiceDep) -> Response:
    """
    Create a customer.

    Typically used by a sign-up workflow for a new account.
    """
    try:
        validate_customer(customer, is_create=True)
        await service.save_customer(customer)
    except InvalidCustomerRequestError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid arguments provided")
    except CustomerEmailExistsError:
        logger.error(f"Exception while creating new customer, email: {customer.email_address} already exists")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Customer email already exists")
    except CustomerDataServiceError:
        logger.error(f"Exception while trying to create customer with data {customer!r}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error while trying to create customer"
        )
    return Response(status_code=status.HTTP_200_OK)


@router.delete(
    "/customer",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Delete Customer",
    description="Delete a customer by customer ID. Unknown IDs are ignored.",
    responses={
        200: {"description": "Customer deleted (or did not exist)"},
        400: {"description": "Missing or malformed customer ID"},
    },
)
async def delete_customer(
    service: CustomerDataServiceDep,
    customer_id: UUID = Query(alias="id"),
) -> Response:
    await service.delete_customer_by_id(customer_id)
    return Response(status_code=status.HTTP_200_OK)
