"""Bulk export DTOs.

Result dataclasses carried from ResourceService back to the presentation
layer.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class ExportResult:
    """Result of a bulk export.

    Attributes:
        job_id: Identifier of this export run (for log correlation).
        total_resources: Number of resources exported.
        batch_count: Number of batches handed to the publisher.
        batch_size: Maximum snapshots per batch.
    """

    job_id: UUID
    total_resources: int
    batch_count: int
    batch_size: int

    @property
    def estimated_seconds(self) -> int:
        """Rough downstream processing estimate (one second per batch)."""
        return self.total_resources // self.batch_size
