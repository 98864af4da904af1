"""Application commands (write operations)."""

from src.application.commands.resource_commands import (
    CharacteristicSpec,
    CreateResource,
    DeleteResource,
    ExportAllResources,
    UpdateResource,
)

__all__ = [
    "CharacteristicSpec",
    "CreateResource",
    "DeleteResource",
    "ExportAllResources",
    "UpdateResource",
]
