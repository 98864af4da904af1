"""ResourceRepository protocol for resource persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.

Versioning Contract:
    save() is a compare-and-swap. Inserting a new resource (version None)
    stores it at version 0. Saving an existing resource succeeds only if the
    stored version still equals the entity's version; the stored version is
    then incremented by one and written back onto the entity. A stale
    version yields Failure(ConcurrencyConflictError) and nothing is written.
"""

from typing import Protocol
from uuid import UUID

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.entities.resource import Resource
from src.domain.enums import ResourceType
from src.domain.value_objects.page import Page, PageRequest


class ResourceRepository(Protocol):
    """Resource repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        find_by_id: Retrieve resource by ID
        find_by_id_with_characteristics: Retrieve resource with children loaded
        find_by_country_code_and_type: Page of resources matching both filters
        find_by_country_code: Page of resources in a country
        find_by_type: Page of resources of a type
        find_all: Page of all resources
        find_all_with_characteristics: Every resource with children loaded
        count: Number of stored resources
        save: Insert or compare-and-swap update
        delete: Remove resource and its characteristics
    """

    async def find_by_id(self, resource_id: UUID) -> Resource | None:
        """Find resource by ID.

        Args:
            resource_id: Resource's unique identifier.

        Returns:
            Resource if found, None otherwise.
        """
        ...

    async def find_by_id_with_characteristics(
        self, resource_id: UUID
    ) -> Resource | None:
        """Find resource by ID with its characteristics eagerly loaded.

        Args:
            resource_id: Resource's unique identifier.

        Returns:
            Resource (characteristics populated) if found, None otherwise.
        """
        ...

    async def find_by_country_code_and_type(
        self,
        country_code: str,
        resource_type: ResourceType,
        page_request: PageRequest,
    ) -> Page[Resource]:
        """Find resources matching both country and type.

        Args:
            country_code: ISO 3166-1 alpha-2 code.
            resource_type: Resource classification.
            page_request: Requested page and ordering.

        Returns:
            Page of matching resources.
        """
        ...

    async def find_by_country_code(
        self, country_code: str, page_request: PageRequest
    ) -> Page[Resource]:
        """Find resources in a country.

        Args:
            country_code: ISO 3166-1 alpha-2 code.
            page_request: Requested page and ordering.

        Returns:
            Page of matching resources.
        """
        ...

    async def find_by_type(
        self, resource_type: ResourceType, page_request: PageRequest
    ) -> Page[Resource]:
        """Find resources of a type.

        Args:
            resource_type: Resource classification.
            page_request: Requested page and ordering.

        Returns:
            Page of matching resources.
        """
        ...

    async def find_all(self, page_request: PageRequest) -> Page[Resource]:
        """Find one page of all resources.

        Args:
            page_request: Requested page and ordering.

        Returns:
            Page of resources.
        """
        ...

    async def find_all_with_characteristics(self) -> list[Resource]:
        """Load every resource with characteristics (bulk export).

        Returns:
            All resources, oldest first.
        """
        ...

    async def count(self) -> int:
        """Count stored resources.

        Returns:
            Number of resources.
        """
        ...

    async def save(self, resource: Resource) -> Result[Resource, DomainError]:
        """Insert a new resource or compare-and-swap an existing one.

        On success the entity's version and timestamps are refreshed from
        what was stored.

        Args:
            resource: Resource to persist.

        Returns:
            Success(Resource) with the stored version, or Failure with
            ConcurrencyConflictError (stale version) or
            IntegrityViolationError (storage constraint breached).
        """
        ...

    async def delete(self, resource: Resource) -> None:
        """Delete resource and cascade to its characteristics.

        Args:
            resource: Previously loaded resource.
        """
        ...
