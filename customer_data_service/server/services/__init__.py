"""Dependency providers for the API layer."""

from .deps import CustomerDataServiceDep, get_customer_data_service

__all__ = ["CustomerDataServiceDep", "get_customer_data_service"]
