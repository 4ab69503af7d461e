"""In-memory reference engine implementing the TraitEngine operations.

Stores each trait slot as an additive array plus a list of coefficients and
evaluates a small set of tracked genotypes against them. Genotypes are sets
of mutant loci; the wild type (no mutations) is always tracked first.

Fitness combines the two conventional traits the way an HIV population under
drug pressure does: replication capacity plus treatment times resistance.
"""

import logging
from typing import Iterable, Sequence

from ..core.models import REPLICATION_TRAIT, RESISTANCE_TRAIT

logger = logging.getLogger(__name__)


HIV_GENOME_LENGTH = 10000

# Gene coordinates on the HIV genome model, [start, end)
HIV_REGIONS: dict[str, tuple[int, int]] = {
    "env": (7000, 8000),
}


class InMemoryTraitEngine:
    """Trait slots and fitness for a handful of genotypes, held in memory.

    Args:
        genome_length: Number of loci L
        number_of_traits: Number of trait slots (at least 2 for fitness)
        regions: Named regions as (start, end); defaults to HIV_REGIONS
        treatment: Weight of the resistance trait in fitness
    """

    def __init__(
        self,
        genome_length: int = HIV_GENOME_LENGTH,
        number_of_traits: int = 2,
        regions: dict[str, tuple[int, int]] | None = None,
        treatment: float = 0.0,
    ):
        if genome_length <= 0:
            raise ValueError(f"genome_length must be positive, got {genome_length}")
        if number_of_traits < 1:
            raise ValueError(f"number_of_traits must be positive, got {number_of_traits}")

        self.genome_length = genome_length
        self.number_of_traits = number_of_traits
        self.regions = dict(HIV_REGIONS if regions is None else regions)
        self.treatment = treatment

        self.additive: list[list[float]] = [
            [0.0] * genome_length for _ in range(number_of_traits)
        ]
        self.coefficients: list[list[tuple[tuple[int, ...], float]]] = [
            [] for _ in range(number_of_traits)
        ]
        self.genotypes: list[frozenset[int]] = [frozenset()]
        self.traits: list[list[float]] = [[0.0] * number_of_traits]
        self.fitness: list[float] = [0.0]

    # ── TraitEngine operations ──

    def clear_trait(self, trait: int) -> None:
        self._check_trait(trait)
        self.additive[trait] = [0.0] * self.genome_length
        self.coefficients[trait] = []

    def set_additive_trait(self, effects: Sequence[float], trait: int) -> None:
        self._check_trait(trait)
        if len(effects) != self.genome_length:
            raise ValueError(
                f"Additive trait needs {self.genome_length} effects, got {len(effects)}"
            )
        self.additive[trait] = [float(value) for value in effects]

    def add_trait_coefficient(
        self, value: float, loci: Sequence[int], trait: int
    ) -> None:
        self._check_trait(trait)
        loci = tuple(loci)
        if not loci:
            raise ValueError("Trait coefficient needs at least one locus")
        for locus in loci:
            self._check_locus(locus)
        self.coefficients[trait].append((loci, float(value)))

    def update_traits(self) -> None:
        self.traits = [self.evaluate(genotype) for genotype in self.genotypes]

    def update_fitness(self) -> None:
        self.fitness = [self._fitness_of(values) for values in self.traits]
        logger.debug(
            "Fitness updated for %d genotypes (treatment=%s)",
            len(self.fitness),
            self.treatment,
        )

    def region(self, name: str) -> tuple[int, int]:
        try:
            return self.regions[name]
        except KeyError:
            raise KeyError(f"Unknown region: {name!r}") from None

    # ── Genotypes ──

    def add_genotype(self, mutations: Iterable[int]) -> int:
        """Track a genotype given its mutant loci; returns its index."""
        genotype = frozenset(mutations)
        for locus in genotype:
            self._check_locus(locus)
        self.genotypes.append(genotype)
        values = self.evaluate(genotype)
        self.traits.append(values)
        self.fitness.append(self._fitness_of(values))
        return len(self.genotypes) - 1

    def evaluate(self, genotype: Iterable[int]) -> list[float]:
        """Trait values of a genotype under the currently installed slots."""
        mutant = frozenset(genotype)
        values = []
        for trait in range(self.number_of_traits):
            additive = self.additive[trait]
            value = sum(additive[locus] for locus in mutant)
            for loci, coefficient in self.coefficients[trait]:
                if all(locus in mutant for locus in loci):
                    value += coefficient
            values.append(value)
        return values

    def _fitness_of(self, values: list[float]) -> float:
        fitness = values[REPLICATION_TRAIT]
        if self.number_of_traits > RESISTANCE_TRAIT:
            fitness += self.treatment * values[RESISTANCE_TRAIT]
        return fitness

    def _check_trait(self, trait: int) -> None:
        if not 0 <= trait < self.number_of_traits:
            raise IndexError(
                f"Trait index {trait} out of range (engine has {self.number_of_traits})"
            )

    def _check_locus(self, locus: int) -> None:
        if not 0 <= locus < self.genome_length:
            raise IndexError(
                f"Locus {locus} out of range for genome length {self.genome_length}"
            )
