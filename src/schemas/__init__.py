"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import ResourceCreateRequest, ResourceResponse
"""

from src.schemas.resource_schemas import (
    # Requests
    CharacteristicRequest,
    LocationRequest,
    ResourceCreateRequest,
    ResourceUpdateRequest,
    # Responses
    CharacteristicResponse,
    ExportAcceptedResponse,
    LocationResponse,
    ResourcePageResponse,
    ResourceResponse,
)

__all__ = [
    "CharacteristicRequest",
    "LocationRequest",
    "ResourceCreateRequest",
    "ResourceUpdateRequest",
    "CharacteristicResponse",
    "ExportAcceptedResponse",
    "LocationResponse",
    "ResourcePageResponse",
    "ResourceResponse",
]
