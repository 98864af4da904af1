"""Resource type classification.

A resource is either a metering point (where consumption is measured) or a
connection point (where a site attaches to the grid). The type is fixed when
the resource is created and never changes afterwards.

Usage:
    from src.domain.enums import ResourceType

    resource = Resource.create(
        resource_type=ResourceType.METERING_POINT, ...
    )
"""

from enum import Enum


class ResourceType(str, Enum):
    """Kind of catalog resource.

    Inherits from str for easy serialization and database storage.
    Values are uppercase to match the public wire format.

    Example:
        >>> ResourceType("METERING_POINT")
        <ResourceType.METERING_POINT: 'METERING_POINT'>
    """

    METERING_POINT = "METERING_POINT"
    CONNECTION_POINT = "CONNECTION_POINT"
