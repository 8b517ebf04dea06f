from __future__ import annotations

import os
import uuid
from pathlib import Path
from typing import Iterable

import httpx
import pytest
from dotenv import load_dotenv

TEST_ROOT = Path(__file__).resolve().parent

# Load test/.env first so test runs can override settings, then pin the database
# to in-memory SQLite before any application module creates its engine.
load_dotenv(TEST_ROOT / ".env", override=False)
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("LOGFIRE_ENABLED", "false")
os.environ.setdefault("ENABLE_FILE_LOGGING", "false")

from customer_data_service.core.database.entities.customers import Customer  # noqa: E402


@pytest.fixture(autouse=True)
def _global_offline_http_guard(monkeypatch: pytest.MonkeyPatch):
    allowed_prefixes: Iterable[str] = (
        "http://localhost",
        "http://127.0.0.1",
        "http://test",
        "/",  # Allow relative paths (used by ASGI transport)
    )

    orig_sync = httpx._client.Client.request
    orig_async = httpx._client.AsyncClient.request

    def _is_allowed(url_str: str) -> bool:
        return any(url_str.startswith(p) for p in allowed_prefixes)

    def offline_sync(self, method, url, *args, **kwargs):
        url_str = str(url)
        if _is_allowed(url_str):
            return orig_sync(self, method, url, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard: {url_str}")

    async def offline_async(self, method, url, *args, **kwargs):
        url_str = str(url)
        if _is_allowed(url_str):
            return await orig_async(self, method, url, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard (async): {url_str}")

    monkeypatch.setattr(httpx._client.Client, "request", offline_sync, raising=True)
    monkeypatch.setattr(httpx._client.AsyncClient, "request", offline_async, raising=True)


@pytest.fixture
def sample_customer_data() -> dict:
    """Valid customer payload in wire (camelCase) format."""
    return {
        "firstName": "firstName",
        "lastName": "lastName",
        "emailAddress": "email@email.com",
        "phoneNumber": "4255252233",
    }


@pytest.fixture
def sample_customer() -> Customer:
    """Customer entity with a generated id."""
    return Customer(
        id=uuid.uuid4(),
        first_name="firstName",
        last_name="lastName",
        email_address="email@email.com",
        phone_number="4255252233",
    )
