"""Resource queries.

Queries are read-only and never publish events.
"""

from dataclasses import dataclass, field
from uuid import UUID

from src.domain.enums import ResourceType
from src.domain.value_objects import PageRequest


@dataclass(frozen=True, kw_only=True)
class GetResource:
    """Query to fetch one resource with its characteristics.

    Attributes:
        resource_id: Resource to fetch.
    """

    resource_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListResources:
    """Query to list resources, optionally filtered by country and/or type.

    Attributes:
        country_code: Only resources in this country.
        resource_type: Only resources of this type.
        page_request: Page, size and ordering.
    """

    country_code: str | None = None
    resource_type: ResourceType | None = None
    page_request: PageRequest = field(default_factory=PageRequest)
