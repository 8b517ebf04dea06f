"""Pydantic models shared by the service and API layers."""

from .io import CustomerPayload, CustomerRead

__all__ = [
    "CustomerPayload",
    "CustomerRead",
]
