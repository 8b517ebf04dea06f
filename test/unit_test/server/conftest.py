"""
Test configuration for server unit tests.

The customer data service is replaced by a mock so the endpoints can be
tested without a database.
"""

from __future__ import annotations

from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from customer_data_service.core.service import CustomerDataService
from customer_data_service.server.main import app
from customer_data_service.server.services.deps import get_customer_data_service


@pytest.fixture
def customer_service() -> AsyncMock:
    """Mocked customer data service injected into the API."""
    return AsyncMock(spec=CustomerDataService)


@pytest.fixture
async def client(customer_service: AsyncMock) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client with the mocked customer data service."""
    app.dependency_overrides[get_customer_data_service] = lambda: customer_service
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
