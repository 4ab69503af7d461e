"""Population engine seam for genoscape.

Usage:
    from genoscape.engine import InMemoryTraitEngine

    engine = InMemoryTraitEngine(genome_length=10000, treatment=0.5)
    set_replication_landscape(engine, seed=42)
    engine.fitness[0]  # wild-type fitness
"""

from .protocol import TraitEngine
from .reference import HIV_GENOME_LENGTH, HIV_REGIONS, InMemoryTraitEngine

__all__ = [
    "TraitEngine",
    "InMemoryTraitEngine",
    "HIV_GENOME_LENGTH",
    "HIV_REGIONS",
]
