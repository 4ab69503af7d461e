"""CLI commands for genoscape."""

from . import (
    build,
    config_cmd,
)

__all__ = [
    "build",
    "config_cmd",
]
