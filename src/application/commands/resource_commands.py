"""Resource commands.

Commands are immutable value objects representing caller intent. They carry
only what each operation may change: UpdateResource has no type or country
field, which makes those attributes write-once by construction.

Architecture:
    - Commands are immutable value objects representing user intent
    - ResourceService executes them and returns Result values
    - A resource event is published after each successful mutation
"""

from dataclasses import dataclass, field
from uuid import UUID

from src.domain.enums import CharacteristicType, ResourceType
from src.domain.value_objects import Location


@dataclass(frozen=True, kw_only=True)
class CharacteristicSpec:
    """Requested characteristic (not yet an entity).

    Attributes:
        code: Characteristic code.
        type: Characteristic type.
        value: Characteristic value.
    """

    code: str
    type: CharacteristicType
    value: str


@dataclass(frozen=True, kw_only=True)
class CreateResource:
    """Command to register a new resource with its characteristics.

    Attributes:
        resource_type: Resource classification (immutable afterwards).
        country_code: Owning country (immutable afterwards).
        location: Initial location.
        characteristics: Initial characteristics in order.
    """

    resource_type: ResourceType
    country_code: str
    location: Location
    characteristics: tuple[CharacteristicSpec, ...] = field(default_factory=tuple)


@dataclass(frozen=True, kw_only=True)
class UpdateResource:
    """Command to change a resource's location and/or characteristics.

    None means "leave unchanged". An empty characteristics tuple clears the
    whole set.

    Attributes:
        resource_id: Resource to update.
        expected_version: Version the caller last read. None skips the
            pre-mutation check (the repository still compares on save).
        location: Replacement location.
        characteristics: Replacement characteristic set.
    """

    resource_id: UUID
    expected_version: int | None = None
    location: Location | None = None
    characteristics: tuple[CharacteristicSpec, ...] | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteResource:
    """Command to delete a resource and its characteristics.

    Attributes:
        resource_id: Resource to delete.
    """

    resource_id: UUID


@dataclass(frozen=True, kw_only=True)
class ExportAllResources:
    """Command to publish every resource as bulk export batches.

    Attributes:
        batch_size: Override for the configured batch size.
    """

    batch_size: int | None = None
