"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
metrics) and exception handlers, and includes all API routers. It serves as
the root of the web server.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from customer_data_service import __version__
from customer_data_service.core.data_loader import load_seed_data
from customer_data_service.core.database import async_session_maker, engine, init_db
from customer_data_service.core.logging_config import get_logger, setup_logging
from customer_data_service.core.monitoring import initialize_logfire

from .api.v1 import customers, health, metrics
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import MetricsMiddleware

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    On startup the customer table is created when missing and the seed
    customers are loaded when ``SEED_DATA_ENABLED`` is set.
    """
    logger.info(f"Starting up {constant.PROJECT_NAME}...")
    await init_db()
    logger.info("Database initialized successfully")

    if settings.seed_data.enabled:
        await load_seed_data(async_session_maker, settings.seed_data.path)

    yield

    logger.info(f"Shutting down {constant.PROJECT_NAME}...")
    await engine.dispose()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    Customer Data Service API

    Stores customer contact information and provides create, read, update and delete operations on it.
    """,
    version=__version__,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

app.add_middleware(MetricsMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.origins,
    allow_credentials=settings.cors.allow_credentials,
    allow_methods=settings.cors.allow_methods,
    allow_headers=settings.cors.allow_headers,
)

setup_exception_handlers(app)
initialize_logfire(app=app, engine=engine)

app.include_router(health.router, tags=["health"])
app.include_router(metrics.router, tags=["metrics"])
app.include_router(customers.router)


def run() -> None:
    """Run the service with uvicorn using host and port from settings."""
    uvicorn.run(
        "customer_data_service.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
