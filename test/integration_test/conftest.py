"""
Test configuration for integration tests.

The full application runs against the in-memory SQLite database with its
lifespan (table creation and seed data) executed once per module.
"""

from __future__ import annotations

from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from customer_data_service.server.main import app, lifespan

_INTEGRATION_ROOT = Path(__file__).resolve().parent


def pytest_collection_modifyitems(config, items):
    for item in items:
        if _INTEGRATION_ROOT in Path(item.path).resolve().parents:
            item.add_marker(pytest.mark.integration)


@pytest_asyncio.fixture(scope="module", loop_scope="module")
async def api_client() -> AsyncGenerator[AsyncClient, None]:
    """Client for the application with seed customers loaded."""
    async with lifespan(app):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as ac:
            yield ac
