"""Location value object.

A resource's physical location is replaced wholesale on update, never patched
field by field. Construction performs no validation so the validator can
report every malformed field in a single pass.

Usage:
    from src.domain.value_objects import Location

    location = Location(
        street_address="Viru 1",
        city="Tallinn",
        postal_code="10111",
        country_code="EE",
    )
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class Location:
    """Immutable postal location of a resource.

    Attributes:
        street_address: Street and house number (max 255 chars).
        city: City name (max 100 chars).
        postal_code: Postal code (max 20 chars).
        country_code: ISO 3166-1 alpha-2 code (two uppercase letters).
    """

    street_address: str
    city: str
    postal_code: str
    country_code: str

    def to_dict(self) -> dict[str, str]:
        """Serialize to the camelCase wire shape."""
        return {
            "streetAddress": self.street_address,
            "city": self.city,
            "postalCode": self.postal_code,
            "countryCode": self.country_code,
        }
