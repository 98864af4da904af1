"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- Database repository for the resource aggregate
- Resource event publishers (in-memory, Redis Streams)
- Structured logging adapter

Structure:
- persistence/: SQLAlchemy models, repository, sample data seeding
- events/: ResourceEventPublisher adapters
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
