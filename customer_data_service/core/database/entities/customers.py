"""
Customer entity model.

This module contains the database entity that models customer contact
information to and from the database.
"""

from __future__ import annotations

import uuid
from typing import Optional

from sqlmodel import Field

from ..base import Base


class Customer(Base, table=True):
    """Persistent customer record.

    The e-mail address is the only unique field besides the primary key.

    Table: customer
    """

    __tablename__ = "customer"
    __table_args__ = ({"extend_existing": True},)

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    first_name: str = Field(nullable=False)
    middle_name: Optional[str] = Field(default=None, nullable=True)
    last_name: str = Field(nullable=False)
    email_address: str = Field(nullable=False, unique=True, index=True)
    phone_number: str = Field(nullable=False)

    def __repr__(self) -> str:
        return f"Customer(id={self.id}, email={self.email_address})"
