"""Validators package exports.

Exports:
    - Field validator functions (from functions.py)
    - Aggregate validation helpers (from resource_validator.py)
"""

from src.domain.validators.functions import (
    validate_characteristic_code,
    validate_characteristic_value,
    validate_city,
    validate_country_code,
    validate_postal_code,
    validate_street_address,
)
from src.domain.validators.resource_validator import (
    CharacteristicLike,
    collect_characteristic_violations,
    collect_location_violations,
    collect_resource_violations,
    find_duplicate_characteristic,
)

__all__ = [
    # Field validators
    "validate_characteristic_code",
    "validate_characteristic_value",
    "validate_city",
    "validate_country_code",
    "validate_postal_code",
    "validate_street_address",
    # Aggregate validation
    "CharacteristicLike",
    "collect_characteristic_violations",
    "collect_location_violations",
    "collect_resource_violations",
    "find_duplicate_characteristic",
]
