"""Resource domain errors.

Defines the message constants used by resource validation and the typed
errors returned by the resource service and repository.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error) instead)

Usage:
    from src.domain.errors import DuplicateCharacteristicError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=DuplicateCharacteristicError(
        code=ErrorCode.DUPLICATE_CHARACTERISTIC,
        message="Duplicate characteristic: code=CONS1, type=CONSUMPTION_TYPE",
        characteristic_code="CONS1",
        characteristic_type="CONSUMPTION_TYPE",
    ))
"""

from dataclasses import dataclass

from src.core.errors import ConflictError, ValidationError


class ResourceError:
    """Resource error message constants.

    Error Categories:
        - Field errors: *_REQUIRED, *_TOO_LONG, INVALID_*
        - Conflict errors: CONCURRENT_UPDATE, DUPLICATE_CHARACTERISTIC_KEY
    """

    # -------------------------------------------------------------------------
    # Field Errors
    # -------------------------------------------------------------------------

    INVALID_COUNTRY_CODE = "Country code must be 2 uppercase letters"
    """ISO 3166-1 alpha-2 format is required for resource and location."""

    STREET_ADDRESS_REQUIRED = "Street address is required"
    STREET_ADDRESS_TOO_LONG = "Street address must not exceed 255 characters"

    CITY_REQUIRED = "City is required"
    CITY_TOO_LONG = "City must not exceed 100 characters"

    POSTAL_CODE_REQUIRED = "Postal code is required"
    POSTAL_CODE_TOO_LONG = "Postal code must not exceed 20 characters"

    CHARACTERISTIC_CODE_REQUIRED = "Characteristic code is required"
    CHARACTERISTIC_CODE_TOO_LONG = "Code must not exceed 5 characters"
    INVALID_CHARACTERISTIC_CODE = (
        "Code must contain only uppercase letters and numbers"
    )

    CHARACTERISTIC_TYPE_REQUIRED = "Characteristic type is required"

    CHARACTERISTIC_VALUE_REQUIRED = "Characteristic value is required"
    CHARACTERISTIC_VALUE_TOO_LONG = "Value must not exceed 255 characters"

    # -------------------------------------------------------------------------
    # Conflict Errors
    # -------------------------------------------------------------------------

    NOT_FOUND = "Resource not found"

    VALIDATION_FAILED = "Resource validation failed"

    CONCURRENT_UPDATE = (
        "Resource was modified by another request. Please refresh and retry."
    )
    """Supplied or persisted version is stale."""

    DUPLICATE_CHARACTERISTIC_KEY = (
        "Duplicate characteristic: combination of code and type already "
        "exists for this resource"
    )
    """Storage-level unique constraint on (resource, code, type) breached."""


@dataclass(frozen=True, slots=True)
class FieldViolation:
    """Single field-level validation failure.

    Attributes:
        field: Dotted path of the offending field (e.g. location.city,
            characteristics[1].code).
        message: Human-readable reason.
    """

    field: str
    message: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ResourceValidationError(ValidationError):
    """Resource input failed structural validation.

    Carries every violation found, not just the first one.

    Attributes:
        violations: All field violations detected.
    """

    violations: tuple[FieldViolation, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class DuplicateCharacteristicError(ValidationError):
    """Two characteristics share the same (code, type) pair.

    Attributes:
        characteristic_code: Code of the repeated characteristic.
        characteristic_type: Type of the repeated characteristic.
    """

    characteristic_code: str
    characteristic_type: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConcurrencyConflictError(ConflictError):
    """Update attempted against a stale version.

    Attributes:
        expected_version: Version the caller (or loaded entity) expected.
        current_version: Version actually stored, when known.
    """

    expected_version: int | None = None
    current_version: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class IntegrityViolationError(ConflictError):
    """Storage constraint rejected the write."""

    constraint: str | None = None
