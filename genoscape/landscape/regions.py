"""Region lookup and the env override for loci inside a region."""

from ..core.models import ConfigurationError, Region, SiteCategory
from ..engine.protocol import TraitEngine


DEFAULT_REGION = "env"


def resolve_region(
    engine: TraitEngine, name: str, trait: int | None = None
) -> Region:
    """Ask the engine for a named region's boundaries.

    Raises:
        ConfigurationError: If the engine does not know the region or
            reports inverted boundaries.
    """
    try:
        start, end = engine.region(name)
    except KeyError as exc:
        raise ConfigurationError(
            f"Engine has no region named {name!r}", parameter="region", trait=trait
        ) from exc
    if not 0 <= start <= end:
        raise ConfigurationError(
            f"Region {name!r} has invalid bounds [{start}, {end})",
            parameter="region",
            trait=trait,
        )
    return Region(name=name, start=start, end=end)


def apply_region_override(
    categories: list[SiteCategory],
    draws: dict[int, float],
    region: Region,
    env_fraction: float,
) -> int:
    """Relabel region loci whose classification draw lands in the env band.

    Reuses the draw already made for the locus, so the override takes no
    extra randomness. Mutates ``categories`` in place.

    Returns:
        Number of loci relabeled as env
    """
    env_cut = 1 - env_fraction
    relabeled = 0
    for locus, u in draws.items():
        if locus in region and u > env_cut:
            categories[locus] = SiteCategory.ENV
            relabeled += 1
    return relabeled
