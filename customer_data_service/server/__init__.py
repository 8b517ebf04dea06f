"""
Customer Data Service Server Package.

This package contains the web server implementation of the customer data service.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration settings and constants.
    exception_handlers: Global and request-validation exception handlers.
    middleware: HTTP metrics middleware.
    services: Dependency providers for the service layer.
"""
