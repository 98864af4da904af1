"""Route generator for the API Route Registry.

register_routes_from_registry() turns RouteMetadata entries into FastAPI
routes when the v1 router is built.

Usage:
    v1_router = APIRouter(prefix=settings.api_v1_prefix)
    register_routes_from_registry(v1_router, ROUTE_REGISTRY)
"""

from typing import Any

from fastapi import APIRouter

from src.presentation.routers.api.v1.errors.problem_details import ProblemDetails
from src.presentation.routers.api.v1.routes.metadata import (
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    """Add one FastAPI route per registry entry.

    Args:
        router: Router receiving the routes.
        registry: Route entries, registered in order.

    Raises:
        ValueError: If two entries share method and path, or a non-GET
            route is declared SAFE.
    """
    seen: set[tuple[str, str]] = set()

    for metadata in registry:
        key = (metadata.method.value, metadata.path)
        if key in seen:
            raise ValueError(f"Duplicate route: {key[0]} {key[1]}")
        seen.add(key)

        if (
            metadata.idempotency == IdempotencyLevel.SAFE
            and metadata.method != HTTPMethod.GET
        ):
            raise ValueError(f"Only GET routes can be SAFE: {key[0]} {key[1]}")

        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=_build_responses(metadata.errors) if metadata.errors else None,
            openapi_extra=_openapi_extensions(metadata),
        )


def _build_responses(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    """Map ErrorSpecs to the FastAPI ``responses`` argument.

    Example:
        >>> _build_responses([ErrorSpec(status=404, description="Not found")])
        {404: {"description": "Not found", "model": ProblemDetails}}
    """
    return {
        error.status: {
            "description": error.description,
            "model": error.model or ProblemDetails,
        }
        for error in errors
    }


def _openapi_extensions(metadata: RouteMetadata) -> dict[str, Any]:
    extensions: dict[str, Any] = {"x-idempotency": metadata.idempotency.value}
    if metadata.uses_if_match:
        extensions["x-optimistic-locking"] = "If-Match"
    return extensions
