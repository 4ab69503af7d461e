"""Pairwise epistatic interactions: fitness valleys and epitopes.

Both kinds pick a base codon, draw a strength, pick a partner codon, then add
single-locus corrections to the shared effect array and append one two-locus
term. Interaction loci are always the second position of a codon.

Valley: both single mutants gain 0.25*s and the double mutant gets a further
0.25*s + 0.5*s, so crossing the pair pays off far more than either step.

Epitope: each single mutant loses a little (0.25 * EPITOPE_DEPRESSION) and the
double mutant additionally loses 0.5*s.
"""

import logging
import math
import random

from ..core.models import ConfigurationError, EpistaticTerm, LandscapeOptions
from .effects import sample_exponential

logger = logging.getLogger(__name__)


VALLEY_MARGIN = 100
EPITOPE_MARGIN = 10

VALLEY_OFFSET_SCALE = 10.0
EPITOPE_SPAN = 9
EPITOPE_DEPRESSION = -0.05


def codon_locus(codon: int) -> int:
    """Second-position locus of a codon."""
    return codon * 3 + 1


def check_interaction_range(
    genome_length: int, options: LandscapeOptions
) -> None:
    """Reject interaction counts the genome is too short to place.

    Raises:
        ConfigurationError: If valleys or epitopes are requested and
            L // 3 does not exceed the corresponding safety margin.
    """
    codons = genome_length // 3
    if options.number_valleys > 0 and codons - VALLEY_MARGIN <= 0:
        raise ConfigurationError(
            f"Genome of {genome_length} loci has no room for valleys "
            f"(needs more than {VALLEY_MARGIN} codons)",
            parameter="number_valleys",
            trait=options.traitnumber,
        )
    if options.number_epitopes > 0 and codons - EPITOPE_MARGIN <= 0:
        raise ConfigurationError(
            f"Genome of {genome_length} loci has no room for epitopes "
            f"(needs more than {EPITOPE_MARGIN} codons)",
            parameter="number_epitopes",
            trait=options.traitnumber,
        )


def add_valleys(
    effects: list[float],
    terms: list[EpistaticTerm],
    count: int,
    strength: float,
    rng: random.Random,
    trait: int | None = None,
) -> None:
    """Place ``count`` valleys, accumulating into ``effects`` and ``terms``.

    Raises:
        ConfigurationError: If a drawn partner codon falls off the genome.
    """
    codons = len(effects) // 3
    for _ in range(count):
        pos = rng.randrange(codons - VALLEY_MARGIN)
        s = sample_exponential(rng, strength)
        offset = math.floor(rng.expovariate(1.0 / VALLEY_OFFSET_SCALE)) + 1

        first = codon_locus(pos)
        second = codon_locus(pos + offset)
        if second >= len(effects):
            raise ConfigurationError(
                f"Valley partner locus {second} is past the end of the genome",
                parameter="number_valleys",
                trait=trait,
            )

        depth = s
        f1 = f2 = 0.25 * s
        f12 = 0.25 * s + 0.5 * depth

        effects[first] += f1
        effects[second] += f2
        terms.append(EpistaticTerm(loci=(first, second), value=f12))


def add_epitopes(
    effects: list[float],
    terms: list[EpistaticTerm],
    count: int,
    strength: float,
    rng: random.Random,
) -> None:
    """Place ``count`` epitopes, accumulating into ``effects`` and ``terms``."""
    codons = len(effects) // 3
    for _ in range(count):
        pos = rng.randrange(codons - EPITOPE_MARGIN)
        s = sample_exponential(rng, strength)
        offsets = sorted(rng.sample(range(EPITOPE_SPAN), 2))

        first = codon_locus(pos + offsets[0])
        second = codon_locus(pos + offsets[1])

        f1 = f2 = 0.25 * EPITOPE_DEPRESSION
        f12 = 0.25 * EPITOPE_DEPRESSION - 0.5 * s

        effects[first] += f1
        effects[second] += f2
        terms.append(EpistaticTerm(loci=(first, second), value=f12))


def generate_epistasis(
    effects: list[float],
    options: LandscapeOptions,
    rng: random.Random,
) -> list[EpistaticTerm]:
    """Add all valleys, then all epitopes, to ``effects``.

    Returns:
        The appended epistatic terms, valleys first
    """
    check_interaction_range(len(effects), options)

    terms: list[EpistaticTerm] = []
    add_valleys(
        effects,
        terms,
        options.number_valleys,
        options.valley_strength,
        rng,
        trait=options.traitnumber,
    )
    add_epitopes(
        effects, terms, options.number_epitopes, options.epitope_strength, rng
    )

    if terms:
        logger.debug(
            "Trait %d: %d valleys, %d epitopes placed",
            options.traitnumber,
            options.number_valleys,
            options.number_epitopes,
        )
    return terms
