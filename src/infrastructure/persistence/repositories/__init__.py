"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.resource_repository import (
    ResourceRepository,
)

__all__ = [
    "ResourceRepository",
]
