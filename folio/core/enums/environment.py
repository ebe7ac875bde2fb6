"""Application environment types.

Used by Settings to pick environment-specific behavior such as the log
renderer (colored console in development, JSON everywhere else).
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
