"""Per-locus site classification.

Each coding locus (codon phase 0 or 1) gets one uniform draw, and the draw is
compared against the lethal, deleterious and adaptive bands in that order,
a later matching band replacing an earlier one. The bands are taken
literally and are not normalized into a partition: a lethal band that
reaches into the adaptive band is overridden by adaptive, for example.
Synonymous loci (phase 2) consume no draw and are always neutral.
"""

import logging
import random

from ..core.models import LandscapeOptions, Region, SiteCategory, is_coding
from .regions import apply_region_override

logger = logging.getLogger(__name__)


def coding_loci(genome_length: int) -> list[int]:
    """Loci at codon phase 0 or 1, in ascending order."""
    return [locus for locus in range(genome_length) if is_coding(locus)]


def classify_draw(u: float, options: LandscapeOptions) -> SiteCategory:
    """Map one uniform draw to a category using the generic bands."""
    lethal = options.lethal_fraction
    deleterious = options.deleterious_fraction
    adaptive_cut = 1 - options.adaptive_fraction

    category = SiteCategory.NEUTRAL
    if u < lethal:
        category = SiteCategory.LETHAL
    if lethal <= u < lethal + deleterious and u < adaptive_cut:
        category = SiteCategory.DELETERIOUS
    if u > adaptive_cut:
        category = SiteCategory.ADAPTIVE
    return category


def classify_sites(
    genome_length: int,
    options: LandscapeOptions,
    rng: random.Random,
    region: Region | None = None,
) -> list[SiteCategory]:
    """
    Assign a SiteCategory to every locus.

    Args:
        genome_length: Number of loci L
        options: Fractions for the lethal/deleterious/adaptive/env bands
        rng: Random number generator (one draw per coding locus, in order)
        region: Optional region whose loci may be relabeled as env

    Returns:
        List of length L with one category per locus
    """
    categories = [SiteCategory.NEUTRAL] * genome_length
    draws: dict[int, float] = {}

    for locus in coding_loci(genome_length):
        u = rng.random()
        draws[locus] = u
        categories[locus] = classify_draw(u, options)

    if region is not None:
        relabeled = apply_region_override(
            categories, draws, region, options.env_fraction
        )
        logger.debug(
            "Region %s [%d, %d): %d loci relabeled as env",
            region.name,
            region.start,
            region.end,
            relabeled,
        )

    return categories
