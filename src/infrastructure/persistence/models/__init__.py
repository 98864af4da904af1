"""Database models for persistence layer.

This package contains SQLAlchemy database models that map to database
tables. These are infrastructure concerns and should not be imported by the
domain layer.

Models Organization:
    - resource.py: Resource aggregate root row (location embedded)
    - characteristic.py: Characteristic rows owned by a resource

Note:
    Domain entities (dataclasses) live in src/domain/entities/
    Database models live here and are mapped via the repository layer.
"""

from src.infrastructure.persistence.models.characteristic import Characteristic
from src.infrastructure.persistence.models.resource import Resource

__all__ = [
    "Characteristic",
    "Resource",
]
