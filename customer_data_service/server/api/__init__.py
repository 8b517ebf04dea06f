"""
API package.

Contains the FastAPI routers of the customer data service.
"""
