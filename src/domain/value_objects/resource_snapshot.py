"""Immutable snapshots of a resource aggregate.

Snapshots decouple what callers and event consumers see from the live,
mutable aggregate. A snapshot taken before deletion remains valid after the
aggregate is gone.

Usage:
    from src.domain.value_objects import ResourceSnapshot

    snapshot = ResourceSnapshot.from_entity(resource)
    payload = snapshot.to_dict()
"""

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any
from uuid import UUID

from src.domain.enums import CharacteristicType, ResourceType
from src.domain.value_objects.location import Location

if TYPE_CHECKING:
    from src.domain.entities import Characteristic, Resource


@dataclass(frozen=True, slots=True, kw_only=True)
class CharacteristicSnapshot:
    """Read-only view of a characteristic."""

    id: UUID
    code: str
    type: CharacteristicType
    value: str

    @classmethod
    def from_entity(cls, characteristic: "Characteristic") -> "CharacteristicSnapshot":
        """Capture the current state of a characteristic."""
        return cls(
            id=characteristic.id,
            code=characteristic.code,
            type=characteristic.type,
            value=characteristic.value,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase wire shape."""
        return {
            "id": str(self.id),
            "code": self.code,
            "type": self.type.value,
            "value": self.value,
        }


@dataclass(frozen=True, slots=True, kw_only=True)
class ResourceSnapshot:
    """Read-only view of a resource and its characteristics.

    Attributes:
        id: Resource identifier.
        type: Resource classification.
        country_code: Owning country.
        location: Location at snapshot time.
        characteristics: Characteristics at snapshot time, in order.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
        version: Persisted version at snapshot time.
    """

    id: UUID
    type: ResourceType
    country_code: str
    location: Location
    characteristics: tuple[CharacteristicSnapshot, ...]
    created_at: datetime | None
    updated_at: datetime | None
    version: int | None

    @classmethod
    def from_entity(cls, resource: "Resource") -> "ResourceSnapshot":
        """Capture the current state of a resource aggregate.

        Args:
            resource: Aggregate to snapshot.

        Returns:
            Snapshot detached from the aggregate.
        """
        return cls(
            id=resource.id,
            type=resource.type,
            country_code=resource.country_code,
            location=resource.location,
            characteristics=tuple(
                CharacteristicSnapshot.from_entity(c) for c in resource.characteristics
            ),
            created_at=resource.created_at,
            updated_at=resource.updated_at,
            version=resource.version,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase wire shape used by events.

        Returns:
            JSON-serializable dictionary.
        """
        return {
            "id": str(self.id),
            "type": self.type.value,
            "countryCode": self.country_code,
            "location": self.location.to_dict(),
            "characteristics": [c.to_dict() for c in self.characteristics],
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
            "version": self.version,
        }
