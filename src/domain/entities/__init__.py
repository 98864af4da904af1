"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.characteristic import Characteristic
from src.domain.entities.resource import Resource

__all__ = [
    "Characteristic",
    "Resource",
]
