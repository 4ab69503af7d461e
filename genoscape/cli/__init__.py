"""Command line interface for genoscape."""
