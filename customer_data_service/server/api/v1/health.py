"""
Health Check Endpoints.

This module provides basic system status endpoints (health, version)
used for monitoring and deployment verification.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from customer_data_service import __version__
from customer_data_service.core import database
from customer_data_service.server.core import constant

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Check the operational status of the API server and its database.",
    response_description="Status object.",
    responses={503: {"description": "Database unavailable"}},
)
async def health_check():
    """
    Health check endpoint.

    Returns 200 with ``status: ok`` while the database answers and 503 otherwise.
    """
    async with database.session_guard.hold():
        reachable = await database.check_connection(database.engine)
    if reachable:
        return {"status": "ok", "database": "ok"}
    return JSONResponse(status_code=503, content={"status": "degraded", "database": "unavailable"})


@router.get(
    "/version",
    summary="Get Version",
    description="Retrieve version information for the API server.",
    response_description="Version object.",
)
async def version():
    """
    Get API version.

    Returns the current semantic version of the API and supported schema version.
    """
    return {"version": __version__, "schema_version": constant.SCHEMA_VERSION}
