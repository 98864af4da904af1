"""Aggregate-level validation for resources.

Field checks collect every violation instead of stopping at the first one,
so a caller can fix all problems in one round trip. The duplicate check
runs separately and reports the first repeated (code, type) pair.

Usage:
    from src.domain.validators import (
        collect_resource_violations,
        find_duplicate_characteristic,
    )

    violations = collect_resource_violations(
        country_code="EE", location=location, characteristics=specs
    )
    duplicate = find_duplicate_characteristic(specs)
"""

from typing import Callable, Protocol, Sequence

from src.domain.enums import CharacteristicType
from src.domain.errors.resource_error import FieldViolation, ResourceError
from src.domain.validators.functions import (
    validate_characteristic_code,
    validate_characteristic_value,
    validate_city,
    validate_country_code,
    validate_postal_code,
    validate_street_address,
)
from src.domain.value_objects.location import Location


class CharacteristicLike(Protocol):
    """Anything carrying a characteristic's code, type and value."""

    @property
    def code(self) -> str: ...

    @property
    def type(self) -> CharacteristicType: ...

    @property
    def value(self) -> str: ...


def _check(
    violations: list[FieldViolation],
    field: str,
    validator: Callable[[str | None], str],
    value: str | None,
) -> None:
    try:
        validator(value)
    except ValueError as e:
        violations.append(FieldViolation(field=field, message=str(e)))


def collect_location_violations(
    location: Location, *, prefix: str = "location"
) -> list[FieldViolation]:
    """Check every location field.

    Args:
        location: Location to check.
        prefix: Path prefix for reported field names.

    Returns:
        Violations found (empty when valid).
    """
    violations: list[FieldViolation] = []
    checks: list[tuple[str, Callable[[str | None], str], str | None]] = [
        ("street_address", validate_street_address, location.street_address),
        ("city", validate_city, location.city),
        ("postal_code", validate_postal_code, location.postal_code),
        ("country_code", validate_country_code, location.country_code),
    ]
    for name, validator, value in checks:
        _check(violations, f"{prefix}.{name}", validator, value)
    return violations


def collect_characteristic_violations(
    characteristics: Sequence[CharacteristicLike],
) -> list[FieldViolation]:
    """Check code and value of every characteristic.

    Args:
        characteristics: Characteristics in input order.

    Returns:
        Violations found, with indexed field paths such as
        ``characteristics[1].code``.
    """
    violations: list[FieldViolation] = []
    for index, characteristic in enumerate(characteristics):
        prefix = f"characteristics[{index}]"
        _check(
            violations,
            f"{prefix}.code",
            validate_characteristic_code,
            characteristic.code,
        )
        _check(
            violations,
            f"{prefix}.value",
            validate_characteristic_value,
            characteristic.value,
        )
        if not isinstance(characteristic.type, CharacteristicType):
            violations.append(
                FieldViolation(
                    field=f"{prefix}.type",
                    message=ResourceError.CHARACTERISTIC_TYPE_REQUIRED,
                )
            )
    return violations


def collect_resource_violations(
    *,
    country_code: str | None,
    location: Location | None,
    characteristics: Sequence[CharacteristicLike] | None,
) -> list[FieldViolation]:
    """Check every supplied part of a resource.

    Parts passed as None are skipped, which lets updates validate only what
    they change.

    Args:
        country_code: Resource country code (None on update).
        location: Location, if supplied.
        characteristics: Characteristics, if supplied.

    Returns:
        All violations found.
    """
    violations: list[FieldViolation] = []
    if country_code is not None:
        _check(violations, "country_code", validate_country_code, country_code)
    if location is not None:
        violations.extend(collect_location_violations(location))
    if characteristics:
        violations.extend(collect_characteristic_violations(characteristics))
    return violations


def find_duplicate_characteristic(
    characteristics: Sequence[CharacteristicLike],
) -> tuple[str, CharacteristicType] | None:
    """Find the first characteristic repeating an earlier (code, type) pair.

    Scans in input order; the second occurrence of a key is the one reported.

    Args:
        characteristics: Characteristics in input order.

    Returns:
        (code, type) of the offending entry, or None when all keys are unique.

    Example:
        >>> find_duplicate_characteristic([a_cons1, b_cp001, c_cons1])
        ('CONS1', <CharacteristicType.CONSUMPTION_TYPE: 'CONSUMPTION_TYPE'>)
    """
    seen: set[str] = set()
    for characteristic in characteristics:
        type_value = getattr(characteristic.type, "value", characteristic.type)
        key = f"{characteristic.code}_{type_value}"
        if key in seen:
            return characteristic.code, characteristic.type
        seen.add(key)
    return None
