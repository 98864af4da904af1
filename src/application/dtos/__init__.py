"""Data Transfer Objects (DTOs) for application layer.

DTOs are result dataclasses returned by application services.
They transfer data from the application layer to the presentation layer.

Usage:
    from src.application.dtos import ExportResult
"""

from src.application.dtos.export_dtos import ExportResult

__all__ = [
    "ExportResult",
]
