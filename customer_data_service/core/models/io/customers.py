"""
Customer I/O models for API requests and responses.

This module contains Pydantic-based I/O schemas for the customer endpoints.
Field names travel as camelCase on the wire (``firstName``, ``emailAddress``)
and snake_case names are accepted on input as well.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CustomerPayload(BaseModel):
    """Schema for creating or updating a customer via API.

    Every field is optional here so missing values are reported by the
    request validator rather than by the framework.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: Optional[UUID] = Field(default=None, description="Customer id (required for updates, ignored on create)")
    first_name: Optional[str] = Field(default=None, description="Customer first name")
    middle_name: Optional[str] = Field(default=None, description="Customer middle name")
    last_name: Optional[str] = Field(default=None, description="Customer last name")
    email_address: Optional[str] = Field(default=None, description="Customer e-mail address (unique)")
    phone_number: Optional[str] = Field(default=None, description="Customer phone number")


class CustomerRead(BaseModel):
    """Schema for reading a customer from API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: UUID
    first_name: str = Field(description="Customer first name")
    middle_name: Optional[str] = Field(default=None, description="Customer middle name")
    last_name: str = Field(description="Customer last name")
    email_address: str = Field(description="Customer e-mail address")
    phone_number: str = Field(description="Customer phone number")
