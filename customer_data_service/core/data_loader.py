"""
Seed data loader.

Populates the database with initial customers from a JSON file on startup.
The packaged ``resources/data.json`` is used unless another path is given.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .database.repositories.customers import CustomerRepository
from .database.entities.customers import Customer
from .logging_config import get_logger
from .models.io.customers import CustomerPayload

logger = get_logger(__name__)

DEFAULT_SEED_FILE = Path(__file__).parent / "resources" / "data.json"


def read_seed_file(path: Optional[Union[str, Path]] = None) -> List[CustomerPayload]:
    """Read and parse a JSON array of customers."""
    raw = Path(path or DEFAULT_SEED_FILE).read_text(encoding="utf-8")
    return [CustomerPayload.model_validate(item) for item in json.loads(raw)]


async def load_seed_data(
    session_factory: async_sessionmaker[AsyncSession],
    path: Optional[Union[str, Path]] = None,
) -> int:
    """Persist the customers of the seed file.

    Failures are logged and never raised so a bad seed file cannot abort startup.

    Returns:
        Number of customers saved.
    """
    saved = 0
    try:
        customers = read_seed_file(path)
        async with session_factory() as session:
            repository = CustomerRepository(session)
            for customer in customers:
                await repository.create(
                    Customer(
                        first_name=customer.first_name,
                        middle_name=customer.middle_name,
                        last_name=customer.last_name,
                        email_address=customer.email_address,
                        phone_number=customer.phone_number,
                    )
                )
                saved += 1
        logger.info("Customer data initialized!")
    except Exception as e:
        logger.error(f"Unable to persist customers: {e}", exc_info=True)
    return saved
