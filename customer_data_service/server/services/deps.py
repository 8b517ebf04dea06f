"""
Service Dependencies.

Provides a request-scoped CustomerDataService bound to the request's database session.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from customer_data_service.core.database import get_session
from customer_data_service.core.service import CustomerDataService


def get_customer_data_service(session: AsyncSession = Depends(get_session)) -> CustomerDataService:
    return CustomerDataService(session)


CustomerDataServiceDep = Annotated[CustomerDataService, Depends(get_customer_data_service)]
