"""Resource lifecycle event types.

Every successful mutation of a resource is announced with exactly one of
these event types.
"""

from enum import Enum


class ResourceEventType(str, Enum):
    """Lifecycle event emitted after a resource mutation is persisted."""

    RESOURCE_CREATED = "RESOURCE_CREATED"
    RESOURCE_UPDATED = "RESOURCE_UPDATED"
    RESOURCE_DELETED = "RESOURCE_DELETED"
