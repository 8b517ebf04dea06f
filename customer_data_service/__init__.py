"""
Customer Data Service.

A REST service that stores customer contact records and exposes create, read,
update and delete operations over HTTP.

Subpackages:
    core: Domain errors, validation, service layer, database layer, logging and metrics.
    server: FastAPI application, routers, middleware and configuration.
"""

__version__ = "0.0.1"
