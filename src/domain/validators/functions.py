"""Centralized validation functions (DRY principle).

All field rules for resources are defined once here and reused by the
aggregate validator and by the Annotated request types.
Validators are pure functions that raise ValueError on validation failure.
"""

import re

from src.core.constants import (
    CHARACTERISTIC_CODE_MAX_LENGTH,
    CHARACTERISTIC_CODE_PATTERN,
    CHARACTERISTIC_VALUE_MAX_LENGTH,
    CITY_MAX_LENGTH,
    COUNTRY_CODE_PATTERN,
    POSTAL_CODE_MAX_LENGTH,
    STREET_ADDRESS_MAX_LENGTH,
)
from src.domain.errors.resource_error import ResourceError


def _require_text(
    v: str | None, *, max_length: int, required: str, too_long: str
) -> str:
    if v is None or not v.strip():
        raise ValueError(required)
    if len(v) > max_length:
        raise ValueError(too_long)
    return v


def validate_country_code(v: str | None) -> str:
    """Validate ISO 3166-1 alpha-2 country code.

    The code must already be uppercase; lowercase input is rejected rather
    than normalized.

    Args:
        v: Country code to validate.

    Returns:
        Country code unchanged.

    Raises:
        ValueError: If code is not exactly two uppercase letters.

    Example:
        >>> validate_country_code("EE")
        'EE'
        >>> validate_country_code("ee")
        ValueError: Country code must be 2 uppercase letters
    """
    if v is None or not re.fullmatch(COUNTRY_CODE_PATTERN, v):
        raise ValueError(ResourceError.INVALID_COUNTRY_CODE)
    return v


def validate_characteristic_code(v: str | None) -> str:
    """Validate characteristic code (1-5 uppercase alphanumerics).

    Args:
        v: Code to validate.

    Returns:
        Code unchanged.

    Raises:
        ValueError: If code is blank, too long or contains other characters.

    Example:
        >>> validate_characteristic_code("CP001")
        'CP001'
        >>> validate_characteristic_code("cp-1")
        ValueError: Code must contain only uppercase letters and numbers
    """
    if v is None or not v.strip():
        raise ValueError(ResourceError.CHARACTERISTIC_CODE_REQUIRED)
    if len(v) > CHARACTERISTIC_CODE_MAX_LENGTH:
        raise ValueError(ResourceError.CHARACTERISTIC_CODE_TOO_LONG)
    if not re.fullmatch(CHARACTERISTIC_CODE_PATTERN, v):
        raise ValueError(ResourceError.INVALID_CHARACTERISTIC_CODE)
    return v


def validate_characteristic_value(v: str | None) -> str:
    """Validate characteristic value (non-blank, max 255 chars).

    Args:
        v: Value to validate.

    Returns:
        Value unchanged.

    Raises:
        ValueError: If value is blank or too long.
    """
    return _require_text(
        v,
        max_length=CHARACTERISTIC_VALUE_MAX_LENGTH,
        required=ResourceError.CHARACTERISTIC_VALUE_REQUIRED,
        too_long=ResourceError.CHARACTERISTIC_VALUE_TOO_LONG,
    )


def validate_street_address(v: str | None) -> str:
    """Validate street address (non-blank, max 255 chars)."""
    return _require_text(
        v,
        max_length=STREET_ADDRESS_MAX_LENGTH,
        required=ResourceError.STREET_ADDRESS_REQUIRED,
        too_long=ResourceError.STREET_ADDRESS_TOO_LONG,
    )


def validate_city(v: str | None) -> str:
    """Validate city name (non-blank, max 100 chars)."""
    return _require_text(
        v,
        max_length=CITY_MAX_LENGTH,
        required=ResourceError.CITY_REQUIRED,
        too_long=ResourceError.CITY_TOO_LONG,
    )


def validate_postal_code(v: str | None) -> str:
    """Validate postal code (non-blank, max 20 chars)."""
    return _require_text(
        v,
        max_length=POSTAL_CODE_MAX_LENGTH,
        required=ResourceError.POSTAL_CODE_REQUIRED,
        too_long=ResourceError.POSTAL_CODE_TOO_LONG,
    )
