"""
I/O models for API requests and responses.

These models are separate from database entities to allow independent
evolution of API contracts.
"""

from .customers import CustomerPayload, CustomerRead

__all__ = [
    "CustomerPayload",
    "CustomerRead",
]
