"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `src/core/config.py` instead.

Categories:
- Field limits: Maximum lengths and formats enforced on resource data
- Paging: Default and maximum page sizes for catalog listings
- Events: Stream naming and bulk export keys

Example:
    >>> from src.core.constants import DEFAULT_PAGE_SIZE, BULK_EXPORT_KEY
    >>> PageRequest(size=DEFAULT_PAGE_SIZE)
"""

# =============================================================================
# Field Limits
# =============================================================================

COUNTRY_CODE_PATTERN: str = r"^[A-Z]{2}$"
"""ISO 3166-1 alpha-2 format (two uppercase letters)."""

CHARACTERISTIC_CODE_PATTERN: str = r"^[A-Z0-9]+$"
"""Characteristic codes are uppercase alphanumerics."""

CHARACTERISTIC_CODE_MAX_LENGTH: int = 5
"""Maximum length of a characteristic code."""

CHARACTERISTIC_VALUE_MAX_LENGTH: int = 255
"""Maximum length of a characteristic value."""

STREET_ADDRESS_MAX_LENGTH: int = 255
"""Maximum length of a location street address."""

CITY_MAX_LENGTH: int = 100
"""Maximum length of a location city."""

POSTAL_CODE_MAX_LENGTH: int = 20
"""Maximum length of a location postal code."""


# =============================================================================
# Paging
# =============================================================================

DEFAULT_PAGE_SIZE: int = 20
"""Default number of resources per listing page."""

MAX_PAGE_SIZE: int = 100
"""Upper bound on page size accepted by listings."""


# =============================================================================
# Events
# =============================================================================

EXPORT_BATCH_SIZE_DEFAULT: int = 100
"""Default number of resource snapshots per bulk export batch."""

MAX_EXPORT_BATCH_SIZE: int = 1000
"""Largest batch size accepted from config or the export endpoint."""

BULK_EXPORT_KEY: str = "bulk-export"
"""Partition key attached to every bulk export batch."""

RESOURCE_EVENTS_STREAM_DEFAULT: str = "resource-events"
"""Default stream/topic name for resource events."""

EVENT_STREAM_MAX_LEN_DEFAULT: int = 100_000
"""Approximate cap on stream length (Redis XADD MAXLEN ~)."""
