"""Resource catalog handlers.

Handler functions for resource endpoints.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    create_resource   - Create a resource
    get_resource      - Get one resource
    list_resources    - List resources (filter, page, sort)
    update_resource   - Update location/characteristics (If-Match aware)
    delete_resource   - Delete a resource
    export_resources  - Publish every resource as export batches

Single-resource responses carry ``ETag: "<version>"``. Clients echo it in
``If-Match`` on update; a stale value yields 409.
"""

import re
from typing import Annotated, Literal
from uuid import UUID

from fastapi import Depends, Header, HTTPException, Path, Query, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands import (
    CreateResource,
    DeleteResource,
    ExportAllResources,
    UpdateResource,
)
from src.application.queries import GetResource, ListResources
from src.application.services.resource_service import ResourceService
from src.core.config import settings
from src.core.constants import (
    COUNTRY_CODE_PATTERN,
    DEFAULT_PAGE_SIZE,
    MAX_EXPORT_BATCH_SIZE,
    MAX_PAGE_SIZE,
)
from src.core.container import get_resource_service
from src.core.result import Failure
from src.domain.enums import ResourceType
from src.domain.value_objects import PageRequest, ResourceSnapshot
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.resource_schemas import (
    ExportAcceptedResponse,
    ResourceCreateRequest,
    ResourcePageResponse,
    ResourceResponse,
    ResourceUpdateRequest,
)

SortField = Literal["createdAt", "updatedAt", "countryCode", "type"]
SortDirection = Literal["asc", "desc"]

_SORT_COLUMNS: dict[str, str] = {
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "countryCode": "country_code",
    "type": "type",
}

# Accepts 3, "3" and W/"3"
_IF_MATCH_PATTERN = re.compile(r'^(?:W/)?"?(\d+)"?$')


# =============================================================================
# Helpers
# =============================================================================


def parse_if_match(value: str | None) -> int | None:
    """Parse an If-Match header into an expected version.

    Args:
        value: Raw header value, or None when absent.

    Returns:
        Expected version, or None when the header is absent or "*".

    Raises:
        HTTPException: 400 if the header is present but not a version.
    """
    if value is None:
        return None
    value = value.strip()
    if value in ("", "*"):
        return None
    match = _IF_MATCH_PATTERN.match(value)
    if match is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="If-Match must be a resource version, e.g. \"3\"",
        )
    return int(match.group(1))


def _etag(snapshot: ResourceSnapshot) -> str:
    return f'"{snapshot.version}"'


def _resource_url(resource_id: UUID) -> str:
    return f"{settings.api_base_url}{settings.api_v1_prefix}/resources/{resource_id}"


# =============================================================================
# Handlers
# =============================================================================


async def create_resource(
    request: Request,
    response: Response,
    data: ResourceCreateRequest,
    service: ResourceService = Depends(get_resource_service),
) -> ResourceResponse | JSONResponse:
    """Create a resource.

    POST /api/v1/resources → 201 Created

    Args:
        request: FastAPI request object.
        response: Response (Location and ETag headers set here).
        data: Validated request body.
        service: Resource service (injected).

    Returns:
        ResourceResponse at version 0.
        JSONResponse with RFC 9457 error on failure.
    """
    command = CreateResource(
        resource_type=data.type,
        country_code=data.country_code,
        location=data.location.to_value_object(),
        characteristics=tuple(c.to_spec() for c in data.characteristics),
    )
    result = await service.create_resource(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            result.error, request, get_trace_id() or ""
        )

    snapshot = result.value
    response.headers["Location"] = _resource_url(snapshot.id)
    response.headers["ETag"] = _etag(snapshot)
    return ResourceResponse.from_snapshot(snapshot)


async def get_resource(
    request: Request,
    response: Response,
    resource_id: Annotated[UUID, Path(description="Resource UUID")],
    service: ResourceService = Depends(get_resource_service),
) -> ResourceResponse | JSONResponse:
    """Get a resource with its characteristics.

    GET /api/v1/resources/{id} → 200 OK
    """
    result = await service.get_resource(GetResource(resource_id=resource_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            result.error, request, get_trace_id() or ""
        )

    response.headers["ETag"] = _etag(result.value)
    return ResourceResponse.from_snapshot(result.value)


async def list_resources(
    request: Request,
    country_code: Annotated[
        str | None,
        Query(
            alias="countryCode",
            pattern=COUNTRY_CODE_PATTERN,
            description="Only resources in this country",
        ),
    ] = None,
    resource_type: Annotated[
        ResourceType | None,
        Query(alias="type", description="Only resources of this type"),
    ] = None,
    page: Annotated[int, Query(ge=0, description="Zero-based page index")] = 0,
    size: Annotated[
        int, Query(ge=1, le=MAX_PAGE_SIZE, description="Page size")
    ] = DEFAULT_PAGE_SIZE,
    sort: Annotated[SortField, Query(description="Sort field")] = "createdAt",
    direction: Annotated[SortDirection, Query(description="Sort direction")] = "desc",
    service: ResourceService = Depends(get_resource_service),
) -> ResourcePageResponse | JSONResponse:
    """List resources, optionally filtered by country and/or type.

    GET /api/v1/resources → 200 OK
    """
    query = ListResources(
        country_code=country_code,
        resource_type=resource_type,
        page_request=PageRequest(
            page=page,
            size=size,
            sort_by=_SORT_COLUMNS[sort],
            descending=direction == "desc",
        ),
    )
    result = await service.list_resources(query)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            result.error, request, get_trace_id() or ""
        )

    return ResourcePageResponse.from_page(result.value)


async def update_resource(
    request: Request,
    response: Response,
    resource_id: Annotated[UUID, Path(description="Resource UUID")],
    data: ResourceUpdateRequest,
    if_match: Annotated[
        str | None,
        Header(alias="If-Match", description="Expected version (ETag)"),
    ] = None,
    service: ResourceService = Depends(get_resource_service),
) -> ResourceResponse | JSONResponse:
    """Update a resource's location and/or characteristics.

    PUT /api/v1/resources/{id} → 200 OK

    Omitting If-Match skips the version check (last writer wins).

    Returns:
        ResourceResponse with the incremented version.
        JSONResponse 404/409/400 on failure.
    """
    command = UpdateResource(
        resource_id=resource_id,
        expected_version=parse_if_match(if_match),
        location=data.location.to_value_object() if data.location else None,
        characteristics=(
            tuple(c.to_spec() for c in data.characteristics)
            if data.characteristics is not None
            else None
        ),
    )
    result = await service.update_resource(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            result.error, request, get_trace_id() or ""
        )

    response.headers["ETag"] = _etag(result.value)
    return ResourceResponse.from_snapshot(result.value)


async def delete_resource(
    request: Request,
    resource_id: Annotated[UUID, Path(description="Resource UUID")],
    service: ResourceService = Depends(get_resource_service),
) -> Response:
    """Delete a resource.

    DELETE /api/v1/resources/{id} → 204 No Content
    """
    result = await service.delete_resource(DeleteResource(resource_id=resource_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            result.error, request, get_trace_id() or ""
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def export_resources(
    request: Request,
    batch_size: Annotated[
        int | None,
        Query(
            alias="batchSize",
            ge=1,
            le=MAX_EXPORT_BATCH_SIZE,
            description="Override batch size",
        ),
    ] = None,
    service: ResourceService = Depends(get_resource_service),
) -> ExportAcceptedResponse | JSONResponse:
    """Publish every resource as consecutive export batches.

    POST /api/v1/resources/export-all → 202 Accepted
    """
    result = await service.export_all(ExportAllResources(batch_size=batch_size))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            result.error, request, get_trace_id() or ""
        )

    return ExportAcceptedResponse.from_result(result.value)
