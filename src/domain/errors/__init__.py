"""Domain errors package.

Exports all domain-level error classes for convenient importing.

Usage:
    from src.domain.errors import ResourceError, ConcurrencyConflictError
"""

from src.domain.errors.resource_error import (
    ConcurrencyConflictError,
    DuplicateCharacteristicError,
    FieldViolation,
    IntegrityViolationError,
    ResourceError,
    ResourceValidationError,
)

__all__ = [
    "ConcurrencyConflictError",
    "DuplicateCharacteristicError",
    "FieldViolation",
    "IntegrityViolationError",
    "ResourceError",
    "ResourceValidationError",
]
