"""
Main FastAPI application entry point.

Builds the FastAPI application: trace middleware, RFC 9457 exception
handlers, the v1 resource routes and the system endpoints.

Lifespan:
    - Startup: seed sample resources when enabled and the catalog is empty
    - Shutdown: flush in-flight event sends, close publisher and database
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import settings
from src.core.container import (
    get_database,
    get_logger,
    get_resource_event_publisher,
)
from src.infrastructure.persistence.repositories import ResourceRepository
from src.infrastructure.persistence.seeds import seed_sample_resources
from src.presentation.routers import system_router
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


async def _seed_if_enabled() -> None:
    if not settings.seed_sample_data:
        return
    async with get_database().get_session() as session:
        await seed_sample_resources(ResourceRepository(session=session), get_logger())


async def _shutdown_publisher() -> None:
    publisher = get_resource_event_publisher()
    close = getattr(publisher, "close", None)
    if close is not None:
        await close()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    logger.info(
        "application_starting",
        environment=settings.environment.value,
        event_publisher=settings.event_publisher_type,
    )

    await _seed_if_enabled()

    yield

    await _shutdown_publisher()
    await get_database().close()
    logger.info("application_stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Catalog of metering and connection points with change events",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 9457 error responses)
register_exception_handlers(app)

# Include API v1 routers and system endpoints
app.include_router(v1_router)
app.include_router(system_router)
