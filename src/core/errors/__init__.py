"""Base error dataclasses shared by every layer.

Usage:
    from src.core.errors import DomainError, NotFoundError
"""

from src.core.errors.common_errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
)
from src.core.errors.domain_error import DomainError

__all__ = [
    "ConflictError",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
