"""Install a synthesized TraitLandscape into a population engine.

The install order is fixed: clear the slot, set the additive array, add each
epistatic coefficient in list order, then recompute traits and fitness.
"""

import logging

from ..core.models import TraitLandscape
from ..engine.protocol import TraitEngine

logger = logging.getLogger(__name__)


class CollaboratorInstallError(RuntimeError):
    """Raised when the engine rejects part of a trait landscape."""

    def __init__(self, message: str, trait: int):
        self.trait = trait
        super().__init__(f"{message} (trait={trait})")


def _check_loci(landscape: TraitLandscape, genome_length: int) -> None:
    if landscape.genome_length != genome_length:
        raise CollaboratorInstallError(
            f"Landscape has {landscape.genome_length} loci, "
            f"engine genome has {genome_length}",
            trait=landscape.trait,
        )
    for term in landscape.terms:
        for locus in term.loci:
            if not 0 <= locus < genome_length:
                raise CollaboratorInstallError(
                    f"Epistatic term {term.loci} has locus {locus} "
                    f"outside [0, {genome_length})",
                    trait=landscape.trait,
                )


def install_landscape(engine: TraitEngine, landscape: TraitLandscape) -> None:
    """
    Install a trait landscape and recompute derived traits and fitness.

    Every locus is range-checked before the engine is touched. If the engine
    still rejects an install, the trait slot is cleared again so it never
    holds a partial landscape.

    Args:
        engine: Population engine exposing the TraitEngine operations
        landscape: Completed additive effects and epistatic terms

    Raises:
        CollaboratorInstallError: If the landscape does not fit the engine
            or the engine rejects an install.
    """
    trait = landscape.trait
    _check_loci(landscape, engine.genome_length)

    try:
        engine.clear_trait(trait)
        engine.set_additive_trait(landscape.effects, trait)
        for term in landscape.terms:
            engine.add_trait_coefficient(term.value, list(term.loci), trait)
    except (IndexError, ValueError) as exc:
        logger.warning("Engine rejected trait %d install: %s", trait, exc)
        try:
            engine.clear_trait(trait)
        except (IndexError, ValueError):
            logger.debug("Trait %d could not be cleared after failed install", trait)
        raise CollaboratorInstallError(
            f"Engine rejected landscape install: {exc}", trait=trait
        ) from exc

    engine.update_traits()
    engine.update_fitness()

    logger.info(
        "Installed trait %d (%s): %d loci, %d epistatic terms",
        trait,
        landscape.name,
        landscape.genome_length,
        len(landscape.terms),
    )
