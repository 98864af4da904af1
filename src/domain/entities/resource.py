"""Resource aggregate root.

A resource is a metering or connection point registered in one country. It
owns an ordered list of characteristics and a replaceable location.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Aggregate root: characteristics are only reachable through it
    - Type and country code are write-once (no mutator exists for them)
    - Version is managed by the repository (optimistic locking token)

Usage:
    from src.domain.entities import Resource
    from src.domain.enums import ResourceType

    resource = Resource.create(
        resource_type=ResourceType.METERING_POINT,
        country_code="EE",
        location=location,
    )
    resource.add_characteristic(characteristic)
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable
from uuid import UUID

from uuid_extensions import uuid7

from src.domain.entities.characteristic import Characteristic
from src.domain.enums import ResourceType
from src.domain.value_objects.location import Location


@dataclass
class Resource:
    """Catalog resource (aggregate root).

    Version Semantics:
        None until the first successful persist, 0 right after it, and one
        higher after every further successful persist. The repository is the
        only component that advances it.

    Attributes:
        id: Unique resource identifier, immutable.
        type: Resource classification, immutable after creation.
        country_code: ISO 3166-1 alpha-2 owning country, immutable.
        location: Current location (replaced wholesale).
        characteristics: Owned characteristics in insertion order.
        created_at: Persisted creation timestamp (set by repository).
        updated_at: Persisted last-modification timestamp (set by repository).
        version: Optimistic locking token.

    Example:
        >>> resource = Resource.create(
        ...     resource_type=ResourceType.CONNECTION_POINT,
        ...     country_code="FI",
        ...     location=Location(
        ...         street_address="Mannerheimintie 1",
        ...         city="Helsinki",
        ...         postal_code="00100",
        ...         country_code="FI",
        ...     ),
        ... )
        >>> resource.is_new
        True
    """

    id: UUID
    type: ResourceType
    country_code: str
    location: Location
    characteristics: list[Characteristic] = field(default_factory=list)

    # Managed by the repository
    created_at: datetime | None = None
    updated_at: datetime | None = None
    version: int | None = None

    @classmethod
    def create(
        cls,
        *,
        resource_type: ResourceType,
        country_code: str,
        location: Location,
    ) -> "Resource":
        """Create a new, not yet persisted resource.

        Args:
            resource_type: Resource classification.
            country_code: Owning country.
            location: Initial location.

        Returns:
            Resource with a fresh UUIDv7 identifier and no version.
        """
        return cls(
            id=uuid7(),
            type=resource_type,
            country_code=country_code,
            location=location,
        )

    @property
    def is_new(self) -> bool:
        """Whether this resource has never been persisted."""
        return self.version is None

    # -------------------------------------------------------------------------
    # Characteristic management
    # -------------------------------------------------------------------------

    def add_characteristic(self, characteristic: Characteristic) -> None:
        """Attach a characteristic to this resource.

        No duplicate check is performed here; uniqueness is enforced by the
        validator before mutation and by the storage constraint on save.

        Args:
            characteristic: Characteristic to append.
        """
        characteristic.resource_id = self.id
        self.characteristics.append(characteristic)

    def remove_characteristic(self, characteristic: Characteristic) -> None:
        """Detach a characteristic from this resource.

        Args:
            characteristic: Previously attached characteristic.

        Raises:
            ValueError: If the characteristic is not attached to this resource.
        """
        self.characteristics.remove(characteristic)
        characteristic.resource_id = None

    def clear_characteristics(self) -> None:
        """Detach every characteristic."""
        for characteristic in list(self.characteristics):
            self.remove_characteristic(characteristic)

    def replace_characteristics(
        self, characteristics: Iterable[Characteristic]
    ) -> None:
        """Replace the whole characteristic set (clear, then add in order).

        Args:
            characteristics: New characteristics in desired order.
        """
        self.clear_characteristics()
        for characteristic in characteristics:
            self.add_characteristic(characteristic)

    # -------------------------------------------------------------------------
    # Location
    # -------------------------------------------------------------------------

    def change_location(self, location: Location) -> None:
        """Replace the location wholesale.

        Args:
            location: New location.
        """
        self.location = location
