"""Characteristic domain entity.

A characteristic is a typed key/value attribute owned by exactly one
resource. It is never addressed on its own; it is added, replaced and
removed through its owning Resource.

Usage:
    from src.domain.entities import Characteristic
    from src.domain.enums import CharacteristicType

    characteristic = Characteristic.create(
        code="CONS1",
        characteristic_type=CharacteristicType.CONSUMPTION_TYPE,
        value="RESIDENTIAL",
    )
"""

from dataclasses import dataclass
from uuid import UUID

from uuid_extensions import uuid7

from src.domain.enums import CharacteristicType


@dataclass
class Characteristic:
    """Key/value attribute of a resource.

    Attributes:
        id: Unique characteristic identifier.
        code: Short uppercase alphanumeric code (1-5 chars).
        type: Characteristic classification. (code, type) is unique per resource.
        value: Free-text value (max 255 chars).
        resource_id: Owning resource, set when attached. Lookup only.
    """

    id: UUID
    code: str
    type: CharacteristicType
    value: str
    resource_id: UUID | None = None

    @classmethod
    def create(
        cls,
        *,
        code: str,
        characteristic_type: CharacteristicType,
        value: str,
    ) -> "Characteristic":
        """Create a detached characteristic with a fresh identifier.

        Args:
            code: Characteristic code.
            characteristic_type: Characteristic type.
            value: Characteristic value.

        Returns:
            New Characteristic not yet attached to any resource.
        """
        return cls(id=uuid7(), code=code, type=characteristic_type, value=value)

    @property
    def key(self) -> str:
        """Uniqueness key within the owning resource."""
        return f"{self.code}_{self.type.value}"
