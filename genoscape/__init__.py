"""genoscape: genotype-to-phenotype landscape synthesis for codon-structured genomes."""

__version__ = "0.1.0"

from .core.models import (
    REPLICATION_TRAIT,
    RESISTANCE_TRAIT,
    ConfigurationError,
    EpistaticTerm,
    LandscapeOptions,
    LandscapeSpec,
    Region,
    SiteCategory,
    TraitLandscape,
)
from .engine import InMemoryTraitEngine, TraitEngine
from .landscape import (
    CollaboratorInstallError,
    install_landscape,
    set_replication_landscape,
    set_resistance_landscape,
    set_trait_landscape,
    synthesize_landscape,
)

__all__ = [
    "__version__",
    "REPLICATION_TRAIT",
    "RESISTANCE_TRAIT",
    "ConfigurationError",
    "CollaboratorInstallError",
    "EpistaticTerm",
    "LandscapeOptions",
    "LandscapeSpec",
    "Region",
    "SiteCategory",
    "TraitLandscape",
    "TraitEngine",
    "InMemoryTraitEngine",
    "install_landscape",
    "set_trait_landscape",
    "set_replication_landscape",
    "set_resistance_landscape",
    "synthesize_landscape",
]
