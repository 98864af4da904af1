"""Application layer errors.

ApplicationError wraps a DomainError with a coarse category that the
presentation layer maps to an HTTP status.
"""

from src.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
)

__all__ = ["ApplicationError", "ApplicationErrorCode"]
