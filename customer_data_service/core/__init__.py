"""
Core package for the customer data service.

Holds the domain errors, request validation, service layer, database layer,
seed data loader, logging configuration and metrics.
"""
