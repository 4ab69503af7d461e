"""Landscape models and YAML I/O for genoscape.

A TraitLandscape is the concrete output of one synthesis call: a per-locus
additive effect array plus an ordered list of pairwise epistatic terms for a
single trait slot.

This module contains:
- Categories: SiteCategory
- Options: LandscapeOptions (the recognized synthesis options and defaults)
- Structure: Region, EpistaticTerm, TraitLandscape
- Spec: LandscapeSpec with YAML I/O (parameters only, never landscapes)
"""

from collections import Counter
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator


REPLICATION_TRAIT = 0
RESISTANCE_TRAIT = 1

TRAIT_NAMES = {
    REPLICATION_TRAIT: "replication",
    RESISTANCE_TRAIT: "resistance",
}


class ConfigurationError(ValueError):
    """Raised when landscape options cannot produce a consistent landscape."""

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        trait: int | None = None,
    ):
        self.parameter = parameter
        self.trait = trait
        context = []
        if trait is not None:
            context.append(f"trait={trait}")
        if parameter is not None:
            context.append(f"parameter={parameter}")
        if context:
            message = f"{message} ({', '.join(context)})"
        super().__init__(message)


# =============================================================================
# Site Categories
# =============================================================================


class SiteCategory(str, Enum):
    LETHAL = "lethal"
    DELETERIOUS = "deleterious"
    ADAPTIVE = "adaptive"
    NEUTRAL = "neutral"
    ENV = "env"


def codon_phase(locus: int) -> int:
    """Position of a locus within its codon (0, 1 coding; 2 synonymous)."""
    return locus % 3


def is_coding(locus: int) -> bool:
    return codon_phase(locus) < 2


# =============================================================================
# Synthesis Options
# =============================================================================


class LandscapeOptions(BaseModel):
    """Statistical parameters for synthesizing one trait landscape.

    Fractions are per-draw probabilities for the classification bands of a
    coding locus. Effect sizes and strengths are means of exponential draws,
    except effect_size_lethal which is applied as a fixed negative constant.
    """

    model_config = ConfigDict(extra="forbid")

    traitnumber: int = Field(default=0, ge=0)
    lethal_fraction: float = Field(default=0.05, ge=0, le=1)
    deleterious_fraction: float = Field(default=0.8, ge=0, le=1)
    adaptive_fraction: float = Field(default=0.01, ge=0, le=1)
    effect_size_lethal: float = Field(default=0.8, ge=0)
    effect_size_deleterious: float = Field(default=0.1, ge=0)
    effect_size_adaptive: float = Field(default=0.01, ge=0)
    env_fraction: float = Field(default=0.1, ge=0, le=1)
    effect_size_env: float = Field(default=0.01, ge=0)
    number_epitopes: int = Field(default=0, ge=0)
    epitope_strength: float = Field(default=0.05, ge=0)
    number_valleys: int = Field(default=0, ge=0)
    valley_strength: float = Field(default=0.1, ge=0)

    @classmethod
    def from_options(cls, **options: Any) -> "LandscapeOptions":
        """Build options from keyword arguments, raising ConfigurationError.

        Raises:
            ConfigurationError: On unknown options or out-of-range values.
                The first offending option is reported as ``parameter``.
        """
        try:
            return cls.model_validate(options)
        except ValidationError as exc:
            raise _configuration_error(exc, options.get("traitnumber")) from exc


def _configuration_error(
    exc: ValidationError, trait: Any = None
) -> ConfigurationError:
    first = exc.errors()[0]
    parameter = ".".join(str(part) for part in first["loc"]) or None
    if first["type"] == "extra_forbidden":
        message = f"Unknown landscape option: {parameter!r}"
    else:
        message = f"Invalid value for {parameter!r}: {first['msg']}"
    return ConfigurationError(
        message,
        parameter=parameter,
        trait=trait if isinstance(trait, int) else None,
    )


# =============================================================================
# Landscape Structure
# =============================================================================


class Region(BaseModel):
    """A contiguous locus interval [start, end) with its own classification."""

    name: str
    start: int = Field(ge=0)
    end: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> "Region":
        if self.end < self.start:
            raise ValueError(
                f"Region {self.name!r} ends before it starts: [{self.start}, {self.end})"
            )
        return self

    def __contains__(self, locus: int) -> bool:
        return self.start <= locus < self.end

    def __len__(self) -> int:
        return self.end - self.start


class EpistaticTerm(BaseModel):
    """A pairwise coefficient applied when both loci carry the mutant allele."""

    loci: tuple[int, int]
    value: float

    @model_validator(mode="after")
    def _check_distinct(self) -> "EpistaticTerm":
        if self.loci[0] == self.loci[1]:
            raise ValueError(f"Epistatic term needs two distinct loci, got {self.loci}")
        return self


class TraitLandscape(BaseModel):
    """Additive effects plus epistatic terms for one trait slot."""

    trait: int
    effects: list[float]
    terms: list[EpistaticTerm] = Field(default_factory=list)
    categories: list[SiteCategory] = Field(default_factory=list)

    @property
    def genome_length(self) -> int:
        return len(self.effects)

    @property
    def name(self) -> str:
        return TRAIT_NAMES.get(self.trait, f"trait_{self.trait}")

    def category_counts(self) -> dict[str, int]:
        """Count loci per category, listing every category even when empty."""
        counts = Counter(category.value for category in self.categories)
        return {category.value: counts.get(category.value, 0) for category in SiteCategory}

    def summary(self) -> dict[str, Any]:
        """Compact summary for logs and CLI output."""
        return {
            "trait": self.trait,
            "name": self.name,
            "genome_length": self.genome_length,
            "categories": self.category_counts(),
            "epistatic_terms": len(self.terms),
            "min_effect": min(self.effects, default=0.0),
            "max_effect": max(self.effects, default=0.0),
        }


# =============================================================================
# Landscape Spec
# =============================================================================


class LandscapeSpec(BaseModel):
    """Parameters for building every trait landscape of one run."""

    model_config = ConfigDict(extra="forbid")

    genome_length: int | None = Field(default=None, gt=0)
    seed: int | None = None
    treatment: float | None = Field(default=None, ge=0)
    region: str | None = None
    traits: list[LandscapeOptions] = Field(default_factory=list)

    def to_yaml(self, path: Path | str) -> None:
        """Save spec to YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data = self.model_dump(mode="json", exclude_none=True)

        with open(path, "w") as f:
            yaml.dump(
                data, f, default_flow_style=False, sort_keys=False, allow_unicode=True
            )

    @classmethod
    def from_yaml(cls, path: Path | str) -> "LandscapeSpec":
        """Load spec from YAML file.

        Raises:
            ConfigurationError: If the file is not valid YAML or its content
                is not a valid spec.
        """
        path = Path(path)

        with open(path) as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Landscape spec {path} must be a mapping, got {type(data).__name__}"
            )

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise _configuration_error(exc) from exc
