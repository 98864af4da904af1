"""Domain enums for business logic.

This package contains enumerations used throughout the domain layer.

Available Enums:
    - ResourceType: Metering point or connection point
    - CharacteristicType: Kind of key/value characteristic
    - ResourceEventType: Lifecycle event types
"""

from src.domain.enums.characteristic_type import CharacteristicType
from src.domain.enums.resource_event_type import ResourceEventType
from src.domain.enums.resource_type import ResourceType

__all__ = [
    "CharacteristicType",
    "ResourceEventType",
    "ResourceType",
]
