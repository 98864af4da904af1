"""Domain value objects.

Immutable value objects shared by entities, services and adapters.
"""

from src.domain.value_objects.location import Location
from src.domain.value_objects.page import SORTABLE_FIELDS, Page, PageRequest
from src.domain.value_objects.resource_snapshot import (
    CharacteristicSnapshot,
    ResourceSnapshot,
)

__all__ = [
    "CharacteristicSnapshot",
    "Location",
    "Page",
    "PageRequest",
    "ResourceSnapshot",
    "SORTABLE_FIELDS",
]
