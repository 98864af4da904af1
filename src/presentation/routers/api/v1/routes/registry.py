"""API Route Registry - Single Source of Truth for all routes.

ROUTE_REGISTRY is the authoritative list of API endpoints. Paths are
relative to the /api/v1 prefix.

Usage:
    from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.v1.routes.generator import register_routes_from_registry

    router = APIRouter(prefix="/api/v1")
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from src.presentation.routers.api.v1.resources import (
    create_resource,
    delete_resource,
    export_resources,
    get_resource,
    list_resources,
    update_resource,
)
from src.presentation.routers.api.v1.routes.metadata import (
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)
from src.schemas.resource_schemas import (
    ExportAcceptedResponse,
    ResourcePageResponse,
    ResourceResponse,
)

_VALIDATION_ERRORS = [
    ErrorSpec(status=400, description="Duplicate characteristic or invalid field"),
    ErrorSpec(status=422, description="Malformed request body"),
]


ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Resources
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/resources/export-all",
        handler=export_resources,
        tags=["Resources"],
        summary="Export all resources",
        description="Publish every resource as consecutive batches to the "
        "event stream. Returns once batches are handed to the publisher.",
        operation_id="export_resources",
        response_model=ExportAcceptedResponse,
        status_code=202,
        errors=[ErrorSpec(status=422, description="Invalid batch size")],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/resources",
        handler=create_resource,
        tags=["Resources"],
        summary="Create resource",
        description="Create a resource with its location and characteristics. "
        "Publishes RESOURCE_CREATED.",
        operation_id="create_resource",
        response_model=ResourceResponse,
        status_code=201,
        errors=_VALIDATION_ERRORS,
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/resources",
        handler=list_resources,
        tags=["Resources"],
        summary="List resources",
        description="List resources filtered by countryCode and/or type, "
        "paged and sorted.",
        operation_id="list_resources",
        response_model=ResourcePageResponse,
        status_code=200,
        errors=[ErrorSpec(status=422, description="Invalid query parameters")],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/resources/{resource_id}",
        handler=get_resource,
        tags=["Resources"],
        summary="Get resource",
        operation_id="get_resource",
        response_model=ResourceResponse,
        status_code=200,
        errors=[ErrorSpec(status=404, description="Resource not found")],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/resources/{resource_id}",
        handler=update_resource,
        tags=["Resources"],
        summary="Update resource",
        description="Replace location and/or characteristics. Send the last "
        "seen version in If-Match to guard against lost updates. "
        "Publishes RESOURCE_UPDATED.",
        operation_id="update_resource",
        response_model=ResourceResponse,
        status_code=200,
        errors=[
            *_VALIDATION_ERRORS,
            ErrorSpec(status=404, description="Resource not found"),
            ErrorSpec(status=409, description="Version mismatch"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        uses_if_match=True,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/resources/{resource_id}",
        handler=delete_resource,
        tags=["Resources"],
        summary="Delete resource",
        description="Delete a resource and its characteristics. "
        "Publishes RESOURCE_DELETED.",
        operation_id="delete_resource",
        status_code=204,
        errors=[ErrorSpec(status=404, description="Resource not found")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
]
