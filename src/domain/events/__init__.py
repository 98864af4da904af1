"""Domain events package.

Usage:
    from src.domain.events import ResourceEvent
"""

from src.domain.events.base_event import DomainEvent
from src.domain.events.resource_events import ResourceEvent, ResourceExportBatch

__all__ = [
    "DomainEvent",
    "ResourceEvent",
    "ResourceExportBatch",
]
