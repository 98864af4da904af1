"""Route metadata types for the API Route Registry.

Each RouteMetadata entry describes one endpoint: method, path, handler and
everything the OpenAPI document needs. The generator turns entries into
FastAPI routes.

Usage:
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/resources/{resource_id}",
        handler=update_resource,
        tags=["Resources"],
        summary="Update resource",
        response_model=ResourceResponse,
        errors=[ErrorSpec(status=409, description="Version mismatch")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        uses_if_match=True,
    )
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel


# =============================================================================
# Enums
# =============================================================================


class HTTPMethod(str, Enum):
    """HTTP methods used by the catalog API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class IdempotencyLevel(str, Enum):
    """RFC 9110 idempotency class, published as ``x-idempotency``.

    Attributes:
        SAFE: Read only (GET).
        IDEMPOTENT: Repeating the request leaves the same state (PUT, DELETE).
        NON_IDEMPOTENT: Every call has a new effect (create, export).
    """

    SAFE = "safe"
    IDEMPOTENT = "idempotent"
    NON_IDEMPOTENT = "non_idempotent"


# =============================================================================
# Route description
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """One documented error response (body defaults to ProblemDetails)."""

    status: int
    description: str
    model: type[BaseModel] | None = None


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Complete specification for an API route.

    Attributes:
        method: HTTP method.
        path: Path relative to the version prefix.
        handler: Async endpoint function.
        tags: OpenAPI tags.
        summary: One-line OpenAPI summary.
        description: Longer OpenAPI description.
        operation_id: Stable OpenAPI operation id.
        response_model: Success body schema (None for 204).
        status_code: Success status.
        errors: Documented error responses.
        idempotency: Idempotency class of the operation.
        uses_if_match: Route honors If-Match for optimistic locking.
    """

    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]
    tags: Sequence[str]
    summary: str
    description: str | None = None
    operation_id: str | None = None
    response_model: type[BaseModel] | None = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None
    idempotency: IdempotencyLevel
    uses_if_match: bool = False
