"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*, DUPLICATE_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (CONCURRENT_*, *_INTEGRITY_*)
- Infrastructure errors (DATABASE_*, EVENT_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_COUNTRY_CODE = "invalid_country_code"
    INVALID_CHARACTERISTIC_CODE = "invalid_characteristic_code"
    DUPLICATE_CHARACTERISTIC = "duplicate_characteristic"

    # Resource errors
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Conflict errors
    CONCURRENT_UPDATE = "concurrent_update"
    DATA_INTEGRITY_VIOLATION = "data_integrity_violation"

    # Infrastructure errors
    DATABASE_ERROR = "database_error"
    EVENT_PUBLISH_FAILED = "event_publish_failed"
