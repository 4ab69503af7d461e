"""Fitness landscape synthesis for genoscape.

Turns statistical options into a concrete trait landscape and installs it
into a population engine.

Usage:
    from genoscape.engine import InMemoryTraitEngine
    from genoscape.landscape import set_replication_landscape

    engine = InMemoryTraitEngine(genome_length=10000)
    landscape = set_replication_landscape(engine, seed=42, number_valleys=5)

Pipeline:
    1. classify_sites: one category per locus (codon phase, bands, env region)
    2. sample_effects: signed effect per locus from its category
    3. generate_epistasis: valleys and epitopes on the same effect array
    4. install_landscape: clear, set additive, add coefficients, update
"""

from .assembler import CollaboratorInstallError, install_landscape
from .builder import (
    set_replication_landscape,
    set_resistance_landscape,
    set_trait_landscape,
    synthesize_landscape,
)
from .effects import sample_effects, sample_exponential
from .epistasis import (
    EPITOPE_DEPRESSION,
    EPITOPE_MARGIN,
    VALLEY_MARGIN,
    add_epitopes,
    add_valleys,
    generate_epistasis,
)
from .regions import DEFAULT_REGION, apply_region_override, resolve_region
from .sites import classify_sites, coding_loci

__all__ = [
    "CollaboratorInstallError",
    "install_landscape",
    "set_trait_landscape",
    "set_replication_landscape",
    "set_resistance_landscape",
    "synthesize_landscape",
    "sample_effects",
    "sample_exponential",
    "EPITOPE_DEPRESSION",
    "EPITOPE_MARGIN",
    "VALLEY_MARGIN",
    "add_valleys",
    "add_epitopes",
    "generate_epistasis",
    "DEFAULT_REGION",
    "apply_region_override",
    "resolve_region",
    "classify_sites",
    "coding_loci",
]
