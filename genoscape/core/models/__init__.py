"""Pydantic models for genoscape.

- landscape.py: site categories, synthesis options, regions, epistatic terms,
  trait landscapes and landscape parameter specs
"""

from .landscape import (
    # Traits
    REPLICATION_TRAIT,
    RESISTANCE_TRAIT,
    TRAIT_NAMES,
    # Errors
    ConfigurationError,
    # Categories
    SiteCategory,
    codon_phase,
    is_coding,
    # Options
    LandscapeOptions,
    # Structure
    Region,
    EpistaticTerm,
    TraitLandscape,
    # Spec
    LandscapeSpec,
)

__all__ = [
    "REPLICATION_TRAIT",
    "RESISTANCE_TRAIT",
    "TRAIT_NAMES",
    "ConfigurationError",
    "SiteCategory",
    "codon_phase",
    "is_coding",
    "LandscapeOptions",
    "Region",
    "EpistaticTerm",
    "TraitLandscape",
    "LandscapeSpec",
]
