"""
Database entity models.

Modules:
- customers: Customer contact records
"""

from .customers import Customer

__all__ = ["Customer"]
