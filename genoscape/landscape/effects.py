"""Category-specific effect sampling.

Turns per-locus categories into the single-locus effect array:
- lethal: fixed negative constant (-effect_size_lethal)
- deleterious: negative exponential draw
- adaptive: positive exponential draw
- env: positive exponential draw with the env scale
- neutral: zero
"""

import random

from ..core.models import LandscapeOptions, SiteCategory


def sample_exponential(rng: random.Random, scale: float) -> float:
    """Exponential draw with mean ``scale``; a zero scale gives 0 without a draw."""
    if scale <= 0:
        return 0.0
    return rng.expovariate(1.0 / scale)


def sample_effect(
    category: SiteCategory, options: LandscapeOptions, rng: random.Random
) -> float:
    """Sample a signed effect for one locus of the given category."""
    if category is SiteCategory.LETHAL:
        return -options.effect_size_lethal
    elif category is SiteCategory.DELETERIOUS:
        return -sample_exponential(rng, options.effect_size_deleterious)
    elif category is SiteCategory.ADAPTIVE:
        return sample_exponential(rng, options.effect_size_adaptive)
    elif category is SiteCategory.ENV:
        return sample_exponential(rng, options.effect_size_env)
    return 0.0


def sample_effects(
    categories: list[SiteCategory],
    options: LandscapeOptions,
    rng: random.Random,
) -> list[float]:
    """Build the single-locus effect array, drawing in ascending locus order."""
    return [sample_effect(category, options, rng) for category in categories]
