"""Configuration management for genoscape.

Holds run-level defaults the CLI falls back on when a landscape spec file
leaves them out: genome length, seed, treatment level and the region used
for the env override.

Config resolution order (highest priority first):
1. Programmatic (GenoscapeConfig constructed in code)
2. Environment variables (GENOSCAPE_GENOME_LENGTH, GENOSCAPE_SEED, etc.)
3. Config file (~/.config/genoscape/config.json, managed by `genoscape config`)
4. Hardcoded defaults

Library functions never read this config; they take explicit arguments.
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any


logger = logging.getLogger(__name__)


# =============================================================================
# Config file location
# =============================================================================

CONFIG_DIR = Path.home() / ".config" / "genoscape"
CONFIG_FILE = CONFIG_DIR / "config.json"


# =============================================================================
# Config dataclasses
# =============================================================================


@dataclass
class DefaultsConfig:
    """Run-level defaults for landscape builds."""

    genome_length: int = 10000
    seed: int | None = None  # None = fresh random seed per run
    treatment: float = 0.0
    region: str = "env"


@dataclass
class GenoscapeConfig:
    """Top-level genoscape configuration.

    Examples:
        # Package use, no files needed
        config = GenoscapeConfig(defaults=DefaultsConfig(genome_length=3000))

        # CLI use, loads from ~/.config/genoscape/config.json
        config = GenoscapeConfig.load()
    """

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    @classmethod
    def load(cls) -> "GenoscapeConfig":
        """Load config from file + env vars.

        Priority: env var values > config.json values > defaults.
        """
        config = cls()

        # Layer 1: Load from config file if it exists
        if CONFIG_FILE.exists():
            try:
                with open(CONFIG_FILE) as f:
                    data = json.load(f)
                _apply_dict(config, data)
            except (json.JSONDecodeError, OSError, ValueError, TypeError) as exc:
                logger.warning("Failed to load config from %s: %s", CONFIG_FILE, exc)
                config = cls()

        # Layer 2: Env var overrides
        if val := os.environ.get("GENOSCAPE_GENOME_LENGTH"):
            try:
                config.defaults.genome_length = int(val)
            except ValueError:
                logger.warning("Invalid GENOSCAPE_GENOME_LENGTH=%r, ignoring", val)
        if val := os.environ.get("GENOSCAPE_SEED"):
            try:
                config.defaults.seed = int(val)
            except ValueError:
                logger.warning("Invalid GENOSCAPE_SEED=%r, ignoring", val)
        if val := os.environ.get("GENOSCAPE_TREATMENT"):
            try:
                config.defaults.treatment = float(val)
            except ValueError:
                logger.warning("Invalid GENOSCAPE_TREATMENT=%r, ignoring", val)
        if val := os.environ.get("GENOSCAPE_REGION"):
            config.defaults.region = val

        return config

    def save(self) -> None:
        """Save config to ~/.config/genoscape/config.json."""
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for display."""
        return {"defaults": asdict(self.defaults)}


# =============================================================================
# Config dict application
# =============================================================================

_INT_FIELDS = {"genome_length", "seed"}
_FLOAT_FIELDS = {"treatment"}


def _coerce_field(key: str, value: Any) -> Any:
    if value is None:
        return None
    if key in _INT_FIELDS:
        return int(value)
    if key in _FLOAT_FIELDS:
        return float(value)
    return value


def _apply_dict(config: GenoscapeConfig, data: dict) -> None:
    """Apply a dict of values onto a GenoscapeConfig."""
    if "defaults" in data and isinstance(data["defaults"], dict):
        for k, v in data["defaults"].items():
            if hasattr(config.defaults, k):
                setattr(config.defaults, k, _coerce_field(k, v))


# =============================================================================
# Global config singleton
# =============================================================================

_config: GenoscapeConfig | None = None


def get_config() -> GenoscapeConfig:
    """Get the global GenoscapeConfig instance.

    First call loads from file + env vars. Subsequent calls return cached instance.
    Use configure() to replace the global config programmatically.
    """
    global _config
    if _config is None:
        _config = GenoscapeConfig.load()
    return _config


def configure(config: GenoscapeConfig) -> None:
    """Set the global GenoscapeConfig programmatically."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global config (forces reload on next get_config())."""
    global _config
    _config = None
