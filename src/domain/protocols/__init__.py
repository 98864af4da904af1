"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import ResourceRepository, ResourceEventPublisher
"""

from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.resource_event_publisher import ResourceEventPublisher
from src.domain.protocols.resource_repository import ResourceRepository

__all__ = [
    "LoggerProtocol",
    "ResourceEventPublisher",
    "ResourceRepository",
]
