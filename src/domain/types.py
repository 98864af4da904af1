"""Annotated types with centralized validation (DRY principle).

Define validation once, use everywhere. Request schemas use these types so
malformed input is rejected at the HTTP boundary with the same rules and
messages the aggregate validator applies.

Usage:
    from src.domain.types import CountryCode, CharacteristicCode

    class CreateResourceRequest(BaseModel):
        country_code: CountryCode
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from src.domain.validators import (
    validate_characteristic_code,
    validate_characteristic_value,
    validate_city,
    validate_country_code,
    validate_postal_code,
    validate_street_address,
)

# ============================================================================
# Resource Types
# ============================================================================

CountryCode = Annotated[
    str,
    Field(
        description="ISO 3166-1 alpha-2 country code",
        examples=["EE", "FI"],
    ),
    AfterValidator(validate_country_code),
]
"""Two uppercase letters. Lowercase input is rejected, not normalized."""

# ============================================================================
# Location Types
# ============================================================================

StreetAddress = Annotated[
    str,
    Field(description="Street address", examples=["Viru 1"]),
    AfterValidator(validate_street_address),
]

City = Annotated[
    str,
    Field(description="City", examples=["Tallinn"]),
    AfterValidator(validate_city),
]

PostalCode = Annotated[
    str,
    Field(description="Postal code", examples=["10111"]),
    AfterValidator(validate_postal_code),
]

# ============================================================================
# Characteristic Types
# ============================================================================

CharacteristicCode = Annotated[
    str,
    Field(
        description="Characteristic code (1-5 uppercase letters or digits)",
        examples=["CONS1", "CP001"],
    ),
    AfterValidator(validate_characteristic_code),
]
"""Characteristic code.

Examples:
    >>> class Item(BaseModel):
    ...     code: CharacteristicCode
    >>> Item(code="cp-1")
    ValidationError: Code must contain only uppercase letters and numbers
"""

CharacteristicValue = Annotated[
    str,
    Field(description="Characteristic value", examples=["RESIDENTIAL"]),
    AfterValidator(validate_characteristic_value),
]
