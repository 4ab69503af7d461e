"""Core infrastructure for genoscape.

This package contains shared definitions used across the pipeline:
- models: All Pydantic models (options, regions, terms, landscapes)
"""

__all__ = [
    "models",
]
