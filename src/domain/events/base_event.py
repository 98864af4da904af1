"""Base domain event class.

Domain events are immutable records of something that already happened in
the catalog, named in past tense.

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUIDv7, time ordered) for tracking
    - occurred_at timestamp (UTC) for ordering

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    >>> class ResourceArchived(DomainEvent):
    ...     resource_id: UUID
    >>>
    >>> event = ResourceArchived(resource_id=resource.id)
    >>> print(event.event_id, event.occurred_at)
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    Attributes:
        event_id: Unique identifier for this event instance. Used by
            consumers for deduplication.
        occurred_at: Timestamp when the event occurred (UTC).
    """

    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
