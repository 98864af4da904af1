"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_resource_service, ...

The container is organized into modules by concern:
- infrastructure: Database, sessions, logging
- events: Resource event publisher
- repositories: Repository factories
- services: Application service factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
)

# Event publisher
from src.core.container.events import get_resource_event_publisher

# Repositories
from src.core.container.repositories import get_resource_repository

# Services
from src.core.container.services import get_resource_service

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    # Events
    "get_resource_event_publisher",
    # Repositories
    "get_resource_repository",
    # Services
    "get_resource_service",
]
