"""Runtime environments.

Settings.environment selects environment-specific behavior: console vs
JSON log rendering and whether the /config debug endpoint is exposed.
"""

from enum import Enum


class Environment(str, Enum):
    """Where the catalog service is running."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
