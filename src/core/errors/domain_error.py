"""Base error type carried inside Failure results.

Every catalog error (validation, lookup miss, version conflict, storage
failure) is a frozen dataclass derived from DomainError. Errors are values:
repositories and services return them in ``Failure(error=...)`` and the
presentation layer maps them to RFC 9457 responses. They are never raised.

Usage:
    from src.core.errors import DomainError

    @dataclass(frozen=True, slots=True, kw_only=True)
    class StaleExportError(DomainError):
        job_id: str
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base catalog error (not an Exception).

    Attributes:
        code: Machine-readable error code, also used as the problem type slug.
        message: Human-readable description, returned as problem detail.
        details: Optional extra context for logs.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def log_fields(self) -> dict[str, str]:
        """Structured logging fields describing this error.

        Returns:
            ``error_code`` and ``error_message`` plus any details.
        """
        fields = {"error_code": self.code.value, "error_message": self.message}
        if self.details:
            fields.update(self.details)
        return fields

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
