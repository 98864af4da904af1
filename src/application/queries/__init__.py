"""Application queries (read operations)."""

from src.application.queries.resource_queries import GetResource, ListResources

__all__ = [
    "GetResource",
    "ListResources",
]
