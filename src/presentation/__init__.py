"""Presentation layer - API endpoints and HTTP concerns.

This layer contains FastAPI routers and endpoint definitions. The presentation
layer is thin - it builds commands/queries, calls ResourceService and
translates results to HTTP responses.

Structure:
- routers/api/v1/: API version 1 endpoints (resource catalog)
- routers/system.py: root, health and config endpoints

The presentation layer depends on the application layer but contains NO
business logic.
"""
