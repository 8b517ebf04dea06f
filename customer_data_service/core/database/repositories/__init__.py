"""
Database repository layer using SQLModel.

Modules:
- base: AsyncBaseRepository interface and QueryBuilder utilities
- customers: Customer repository operations
"""

from .base import AsyncBaseRepository, QueryBuilder
from .customers import CustomerRepository

__all__ = [
    "AsyncBaseRepository",
    "CustomerRepository",
    "QueryBuilder",
]
