"""Application layer error types.

Application errors wrap domain errors with the category the presentation
layer needs to pick an HTTP status.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum

from src.core.enums import ErrorCode
from src.core.errors.domain_error import DomainError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.CONFLICT,
        ...     message="Resource was modified by another request.",
        ... )
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    QUERY_FAILED = "query_failed"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


# Domain error code -> application category
_DOMAIN_CODE_MAPPING: dict[ErrorCode, ApplicationErrorCode] = {
    ErrorCode.VALIDATION_FAILED: ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
    ErrorCode.INVALID_COUNTRY_CODE: ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
    ErrorCode.INVALID_CHARACTERISTIC_CODE: ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
    ErrorCode.DUPLICATE_CHARACTERISTIC: ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
    ErrorCode.DATA_INTEGRITY_VIOLATION: ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
    ErrorCode.RESOURCE_NOT_FOUND: ApplicationErrorCode.NOT_FOUND,
    ErrorCode.CONCURRENT_UPDATE: ApplicationErrorCode.CONFLICT,
}


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        domain_error: Original domain error (if error originated from domain layer)
        details: Additional context as key-value pairs

    Examples:
        >>> error = ApplicationError.from_domain_error(not_found_error)
        >>> error.code
        <ApplicationErrorCode.NOT_FOUND: 'not_found'>
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None

    @classmethod
    def from_domain_error(cls, error: DomainError) -> "ApplicationError":
        """Wrap a domain error, choosing the application category by its code.

        Unknown codes map to COMMAND_EXECUTION_FAILED.

        Args:
            error: Domain error returned by a service.

        Returns:
            ApplicationError carrying the original error.
        """
        return cls(
            code=_DOMAIN_CODE_MAPPING.get(
                error.code, ApplicationErrorCode.COMMAND_EXECUTION_FAILED
            ),
            message=error.message,
            domain_error=error,
            details=error.details,
        )
