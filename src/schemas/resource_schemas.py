"""Resource request and response schemas.

Pydantic schemas for resource API endpoints. Includes:
- Request schemas (client → API), camelCase on the wire
- Response schemas (API → client)
- Snapshot-to-schema conversion methods

Field formats are checked here with the shared Annotated types, so a
malformed body is rejected with 422 before it reaches the service. Rules that
need the whole request (duplicate characteristics) are checked by the
service and surface as 400.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.application.commands import CharacteristicSpec
from src.application.dtos import ExportResult
from src.domain.enums import CharacteristicType, ResourceType
from src.domain.types import (
    CharacteristicCode,
    CharacteristicValue,
    City,
    CountryCode,
    PostalCode,
    StreetAddress,
)
from src.domain.value_objects import Location, Page, ResourceSnapshot


class CamelModel(BaseModel):
    """Base schema: camelCase aliases, snake_case attribute names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


# =============================================================================
# Request Schemas
# =============================================================================


class LocationRequest(CamelModel):
    """Location part of a create/update body."""

    street_address: StreetAddress
    city: City
    postal_code: PostalCode
    country_code: CountryCode

    def to_value_object(self) -> Location:
        return Location(
            street_address=self.street_address,
            city=self.city,
            postal_code=self.postal_code,
            country_code=self.country_code,
        )


class CharacteristicRequest(CamelModel):
    """One characteristic in a create/update body."""

    code: CharacteristicCode
    type: CharacteristicType = Field(..., description="Characteristic type")
    value: CharacteristicValue

    def to_spec(self) -> CharacteristicSpec:
        return CharacteristicSpec(code=self.code, type=self.type, value=self.value)


class ResourceCreateRequest(CamelModel):
    """Request to create a resource.

    Attributes:
        type: Resource type.
        country_code: Owning country (immutable afterwards).
        location: Initial location.
        characteristics: Initial characteristics (optional).
    """

    type: ResourceType = Field(..., description="Resource type")
    country_code: CountryCode
    location: LocationRequest
    characteristics: list[CharacteristicRequest] = Field(
        default_factory=list, description="Initial characteristics"
    )


class ResourceUpdateRequest(CamelModel):
    """Request to update a resource.

    Only location and characteristics may change. Omitted parts are left
    untouched; a supplied characteristics list replaces the whole set.
    Type and country code are immutable, so any other field is rejected.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    location: LocationRequest | None = None
    characteristics: list[CharacteristicRequest] | None = None


# =============================================================================
# Response Schemas
# =============================================================================


class LocationResponse(CamelModel):
    street_address: str
    city: str
    postal_code: str
    country_code: str


class CharacteristicResponse(CamelModel):
    id: UUID
    code: str
    type: CharacteristicType
    value: str


class ResourceResponse(CamelModel):
    """Single resource response.

    Attributes:
        id: Resource unique identifier.
        type: Resource type.
        country_code: Owning country.
        location: Current location.
        characteristics: Characteristics in insertion order.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
        version: Optimistic locking version (send back as If-Match).
    """

    id: UUID = Field(..., description="Resource unique identifier")
    type: ResourceType
    country_code: str
    location: LocationResponse
    characteristics: list[CharacteristicResponse]
    created_at: datetime | None = None
    updated_at: datetime | None = None
    version: int | None = Field(None, description="Optimistic locking version")

    @classmethod
    def from_snapshot(cls, snapshot: ResourceSnapshot) -> "ResourceResponse":
        """Convert a resource snapshot to the response schema.

        Args:
            snapshot: ResourceSnapshot from the service.

        Returns:
            ResourceResponse for API response.
        """
        location = snapshot.location
        return cls(
            id=snapshot.id,
            type=snapshot.type,
            country_code=snapshot.country_code,
            location=LocationResponse(
                street_address=location.street_address,
                city=location.city,
                postal_code=location.postal_code,
                country_code=location.country_code,
            ),
            characteristics=[
                CharacteristicResponse(id=c.id, code=c.code, type=c.type, value=c.value)
                for c in snapshot.characteristics
            ],
            created_at=snapshot.created_at,
            updated_at=snapshot.updated_at,
            version=snapshot.version,
        )


class ResourcePageResponse(CamelModel):
    """Paged resource listing."""

    items: list[ResourceResponse]
    page: int
    size: int
    total_items: int
    total_pages: int

    @classmethod
    def from_page(cls, page: Page[ResourceSnapshot]) -> "ResourcePageResponse":
        return cls(
            items=[ResourceResponse.from_snapshot(s) for s in page.items],
            page=page.page,
            size=page.size,
            total_items=page.total_items,
            total_pages=page.total_pages,
        )


class ExportAcceptedResponse(CamelModel):
    """Bulk export acknowledgement (202 Accepted)."""

    message: str
    total_resources: int
    batch_count: int
    estimated_time: str = Field(..., examples=["2 seconds"])
    job_id: UUID

    @classmethod
    def from_result(cls, result: ExportResult) -> "ExportAcceptedResponse":
        return cls(
            message="Export started",
            total_resources=result.total_resources,
            batch_count=result.batch_count,
            estimated_time=f"{result.estimated_seconds} seconds",
            job_id=result.job_id,
        )
