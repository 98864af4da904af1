"""Common error classes shared by every layer.

Error Types:
- ValidationError: Input validation failures
- NotFoundError: Entity lookup misses
- ConflictError: State conflicts (stale versions, constraint breaches)

Usage:
    from src.core.errors import NotFoundError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=NotFoundError(
        code=ErrorCode.RESOURCE_NOT_FOUND,
        message="Resource not found",
        resource_type="Resource",
        resource_id=str(resource_id),
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Entity not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Kind of entity (Resource, Characteristic).
        resource_id: ID of the entity that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """State conflict (stale version, duplicate key).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Kind of entity in conflict.
        conflicting_field: Field that has conflict (version, code, ...).
        details: Additional context.
    """

    resource_type: str
    conflicting_field: str | None = None
