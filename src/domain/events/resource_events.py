"""Resource lifecycle events.

One event is emitted per successful create, update or delete. Each carries a
full snapshot of the resource: the post-mutation state for create/update and
the pre-deletion state for delete.

Wire Format (to_dict):
    {
        "eventId": "<uuid>",
        "eventType": "RESOURCE_CREATED" | "RESOURCE_UPDATED" | "RESOURCE_DELETED",
        "resourceId": "<uuid>",
        "resource": { ...snapshot... },
        "timestamp": "<ISO-8601 UTC>"
    }

Consumers partition by resourceId, so events for one resource stay ordered
on transports that honor keys.
"""

from dataclasses import dataclass
from typing import Any, Sequence
from uuid import UUID

from src.domain.enums import ResourceEventType
from src.domain.events.base_event import DomainEvent
from src.domain.value_objects.resource_snapshot import ResourceSnapshot


@dataclass(frozen=True, kw_only=True, slots=True)
class ResourceEvent(DomainEvent):
    """Resource was created, updated or deleted.

    Attributes:
        event_type: Which lifecycle transition happened.
        resource_id: Affected resource (also the partition key).
        resource: Snapshot of the resource for this event.
    """

    event_type: ResourceEventType
    resource_id: UUID
    resource: ResourceSnapshot

    @classmethod
    def for_snapshot(
        cls, event_type: ResourceEventType, snapshot: ResourceSnapshot
    ) -> "ResourceEvent":
        """Build an event keyed by the snapshot's resource id."""
        return cls(event_type=event_type, resource_id=snapshot.id, resource=snapshot)

    @property
    def key(self) -> str:
        """Partition key for ordered transports."""
        return str(self.resource_id)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON envelope sent to consumers.

        Returns:
            JSON-serializable dictionary.
        """
        return {
            "eventId": str(self.event_id),
            "eventType": self.event_type.value,
            "resourceId": str(self.resource_id),
            "resource": self.resource.to_dict(),
            "timestamp": self.occurred_at.isoformat(),
        }


@dataclass(frozen=True, kw_only=True, slots=True)
class ResourceExportBatch:
    """One batch of a bulk export.

    Attributes:
        key: Partition key shared by every batch of an export.
        batch_index: Zero-based position of this batch in the export.
        resources: Snapshots in export order.
    """

    key: str
    batch_index: int
    resources: tuple[ResourceSnapshot, ...]

    @classmethod
    def split(
        cls, snapshots: Sequence[ResourceSnapshot], batch_size: int, *, key: str
    ) -> list["ResourceExportBatch"]:
        """Split snapshots into consecutive batches of at most batch_size.

        Args:
            snapshots: Snapshots in export order.
            batch_size: Maximum snapshots per batch.
            key: Partition key for every batch.

        Returns:
            Batches in order; empty when there are no snapshots.

        Raises:
            ValueError: If batch_size is less than 1.

        Example:
            >>> [len(b.resources) for b in ResourceExportBatch.split(s250, 100, key="k")]
            [100, 100, 50]
        """
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        return [
            cls(
                key=key,
                batch_index=index,
                resources=tuple(snapshots[start : start + batch_size]),
            )
            for index, start in enumerate(range(0, len(snapshots), batch_size))
        ]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON payload sent to consumers."""
        return {
            "batchIndex": self.batch_index,
            "size": len(self.resources),
            "resources": [r.to_dict() for r in self.resources],
        }
