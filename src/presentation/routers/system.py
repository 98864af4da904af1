"""System router for non-versioned application endpoints.

Root, health and configuration endpoints. Lightweight and side-effect free
to support health checks and basic diagnostics.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.container import get_database


system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check."""
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> JSONResponse:
    """Health check endpoint for monitoring and load balancers.

    Returns:
        200 with {"status": "healthy"} when the database answers,
        503 with {"status": "unhealthy"} otherwise.
    """
    database_ok = await get_database().check_connection()
    return JSONResponse(
        status_code=status.HTTP_200_OK
        if database_ok
        else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "healthy" if database_ok else "unhealthy",
            "database": "ok" if database_ok else "unavailable",
        },
    )


@system_router.get("/config")
async def get_config() -> JSONResponse:
    """Configuration debug endpoint (development only)."""
    if not settings.is_development:
        return JSONResponse(
            status_code=403,
            content={"detail": "Config endpoint only available in development"},
        )

    return JSONResponse(
        content={
            "environment": settings.environment.value,
            "debug": settings.debug,
            "api": {
                "name": settings.app_name,
                "version": settings.app_version,
                "base_url": settings.api_base_url,
                "v1_prefix": settings.api_v1_prefix,
            },
            "database": {
                "url": "<redacted>",  # Never expose credentials
                "echo": settings.db_echo,
            },
            "events": {
                "publisher": settings.event_publisher_type,
                "stream": settings.resource_events_stream,
                "export_batch_size": settings.export_batch_size,
            },
        }
    )
