"""Landscape synthesis entry points.

The builder is a generic option interpreter: it doesn't know what a trait
means, it runs site classification, effect sampling and epistasis placement
for whatever options it's given and hands the result to the assembler.

Draw order is part of the contract. For one seed and one set of options the
landscape is reproducible only if classification draws come first, then
effect draws, then valley draws, then epitope draws.
"""

import logging
import random
from typing import Any

from ..core.models import (
    REPLICATION_TRAIT,
    RESISTANCE_TRAIT,
    ConfigurationError,
    LandscapeOptions,
    Region,
    TraitLandscape,
)
from ..engine.protocol import TraitEngine
from .assembler import install_landscape
from .effects import sample_effects
from .epistasis import check_interaction_range, generate_epistasis
from .regions import DEFAULT_REGION, resolve_region
from .sites import classify_sites

logger = logging.getLogger(__name__)


def synthesize_landscape(
    genome_length: int,
    options: LandscapeOptions,
    rng: random.Random,
    region: Region | None = None,
) -> TraitLandscape:
    """
    Build a trait landscape without touching any engine.

    Args:
        genome_length: Number of loci L
        options: Synthesis options (trait index, fractions, effect sizes, counts)
        rng: Random number generator (seeded for reproducibility)
        region: Region whose loci may be relabeled as env

    Returns:
        TraitLandscape with effects, epistatic terms and per-locus categories

    Raises:
        ConfigurationError: If the interaction counts don't fit the genome
    """
    check_interaction_range(genome_length, options)

    categories = classify_sites(genome_length, options, rng, region)
    effects = sample_effects(categories, options, rng)
    terms = generate_epistasis(effects, options, rng)

    landscape = TraitLandscape(
        trait=options.traitnumber,
        effects=effects,
        terms=terms,
        categories=categories,
    )
    logger.debug("Synthesized %s", landscape.summary())
    return landscape


def set_trait_landscape(
    engine: TraitEngine,
    rng: random.Random | None = None,
    seed: int | None = None,
    region: str = DEFAULT_REGION,
    **options: Any,
) -> TraitLandscape:
    """
    Synthesize a landscape for one trait slot and install it into ``engine``.

    Args:
        engine: Population engine exposing the TraitEngine operations
        rng: Random number generator; created from ``seed`` when omitted
        seed: Random seed used only when ``rng`` is omitted (None = random)
        region: Name of the engine region used for the env override
        **options: Landscape options (see LandscapeOptions for names/defaults)

    Returns:
        The installed TraitLandscape

    Raises:
        ConfigurationError: On unknown or invalid options, both ``rng`` and
            ``seed`` given, an unknown region, or interaction counts that
            don't fit the genome
        CollaboratorInstallError: If the engine rejects the install
    """
    opts = LandscapeOptions.from_options(**options)

    if rng is not None and seed is not None:
        raise ConfigurationError(
            "Pass either rng or seed, not both",
            parameter="seed",
            trait=opts.traitnumber,
        )
    if rng is None:
        if seed is None:
            seed = random.randint(0, 2**31 - 1)
        rng = random.Random(seed)

    resolved = resolve_region(engine, region, trait=opts.traitnumber)
    landscape = synthesize_landscape(engine.genome_length, opts, rng, resolved)

    counts = landscape.category_counts()
    logger.info(
        "Trait %d: %d lethal, %d deleterious, %d adaptive, %d env sites; %d terms",
        opts.traitnumber,
        counts["lethal"],
        counts["deleterious"],
        counts["adaptive"],
        counts["env"],
        len(landscape.terms),
    )

    install_landscape(engine, landscape)
    return landscape


def _reject_traitnumber(options: dict[str, Any], trait: int) -> None:
    if "traitnumber" in options:
        raise ConfigurationError(
            "traitnumber is fixed for this landscape",
            parameter="traitnumber",
            trait=trait,
        )


def set_replication_landscape(
    engine: TraitEngine,
    rng: random.Random | None = None,
    seed: int | None = None,
    region: str = DEFAULT_REGION,
    **options: Any,
) -> TraitLandscape:
    """Build the replication capacity landscape (trait 0)."""
    _reject_traitnumber(options, REPLICATION_TRAIT)
    return set_trait_landscape(
        engine,
        rng=rng,
        seed=seed,
        region=region,
        traitnumber=REPLICATION_TRAIT,
        **options,
    )


def set_resistance_landscape(
    engine: TraitEngine,
    rng: random.Random | None = None,
    seed: int | None = None,
    region: str = DEFAULT_REGION,
    **options: Any,
) -> TraitLandscape:
    """Build the drug resistance landscape (trait 1)."""
    _reject_traitnumber(options, RESISTANCE_TRAIT)
    return set_trait_landscape(
        engine,
        rng=rng,
        seed=seed,
        region=region,
        traitnumber=RESISTANCE_TRAIT,
        **options,
    )
