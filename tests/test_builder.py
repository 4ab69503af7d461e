"""End-to-end tests for landscape synthesis and installation."""

import random

import pytest

from genoscape.core.models import (
    ConfigurationError,
    LandscapeOptions,
    Region,
    SiteCategory,
)
from genoscape.engine import InMemoryTraitEngine
from genoscape.landscape import (
    set_replication_landscape,
    set_resistance_landscape,
    set_trait_landscape,
    synthesize_landscape,
)

_ZERO_FRACTIONS = dict(
    lethal_fraction=0.0,
    deleterious_fraction=0.0,
    adaptive_fraction=0.0,
    env_fraction=0.0,
)


class TestScenarios:
    def test_all_lethal_short_genome(self):
        engine = InMemoryTraitEngine(genome_length=12)
        landscape = set_trait_landscape(
            engine,
            seed=1,
            lethal_fraction=1.0,
            deleterious_fraction=0.0,
            adaptive_fraction=0.0,
            env_fraction=0.0,
            number_valleys=0,
            number_epitopes=0,
        )

        expected = [-0.8, -0.8, 0.0] * 4
        assert landscape.effects == expected
        assert engine.additive[0] == expected
        assert landscape.terms == []

    def test_all_zero_fractions(self):
        engine = InMemoryTraitEngine(genome_length=300)
        landscape = set_trait_landscape(engine, seed=5, **_ZERO_FRACTIONS)
        assert landscape.effects == [0.0] * 300
        assert set(landscape.categories) == {SiteCategory.NEUTRAL}

    def test_lethal_everywhere_outside_region(self):
        engine = InMemoryTraitEngine(
            genome_length=90, regions={"env": (30, 60)}
        )
        landscape = set_trait_landscape(
            engine, seed=2, **{**_ZERO_FRACTIONS, "lethal_fraction": 1.0}
        )
        for locus, effect in enumerate(landscape.effects):
            if locus % 3 < 2:
                assert effect == -0.8
            else:
                assert effect == 0.0

    def test_env_region_draws_positive_effects(self):
        engine = InMemoryTraitEngine(
            genome_length=90, regions={"env": (30, 60)}
        )
        landscape = set_trait_landscape(
            engine,
            seed=3,
            lethal_fraction=1.0,
            adaptive_fraction=0.0,
            env_fraction=1.0,
        )
        for locus in range(30, 60):
            if locus % 3 < 2:
                assert landscape.categories[locus] is SiteCategory.ENV
                assert landscape.effects[locus] > 0
        assert landscape.effects[0] == -0.8

    def test_synonymous_loci_zero_with_default_options(self):
        engine = InMemoryTraitEngine(genome_length=3000, regions={"env": (900, 1500)})
        landscape = set_trait_landscape(engine, seed=8, number_epitopes=10)
        assert all(landscape.effects[locus] == 0.0 for locus in range(2, 3000, 3))

    def test_valley_and_epitope_counts(self):
        engine = InMemoryTraitEngine(genome_length=3000)
        landscape = set_trait_landscape(
            engine, seed=4, number_valleys=3, number_epitopes=5
        )
        assert len(landscape.terms) == 8
        assert len(engine.coefficients[0]) == 8
        assert all(locus % 3 == 1 for term in landscape.terms for locus in term.loci)


class TestDeterminism:
    def test_same_seed_same_landscape(self):
        options = dict(number_valleys=4, number_epitopes=6)
        first = set_trait_landscape(InMemoryTraitEngine(3000), seed=99, **options)
        second = set_trait_landscape(InMemoryTraitEngine(3000), seed=99, **options)

        assert first.effects == second.effects
        assert first.terms == second.terms

    def test_explicit_rng_matches_seed(self):
        from_seed = set_trait_landscape(InMemoryTraitEngine(600), seed=7)
        from_rng = set_trait_landscape(InMemoryTraitEngine(600), rng=random.Random(7))
        assert from_seed.effects == from_rng.effects

    def test_synthesize_is_pure(self):
        options = LandscapeOptions(number_epitopes=2)
        region = Region(name="env", start=0, end=30)
        first = synthesize_landscape(300, options, random.Random(1), region)
        second = synthesize_landscape(300, options, random.Random(1), region)
        assert first == second


class TestTraitSlots:
    def test_replication_and_resistance_fill_separate_slots(self):
        engine = InMemoryTraitEngine(genome_length=300, treatment=1.0)
        rng = random.Random(10)
        replication = set_replication_landscape(engine, rng=rng)
        resistance = set_resistance_landscape(
            engine, rng=rng, deleterious_fraction=0.0, adaptive_fraction=0.5
        )

        assert replication.trait == 0
        assert resistance.trait == 1
        assert engine.additive[0] == replication.effects
        assert engine.additive[1] == resistance.effects

    def test_rebuilding_a_trait_replaces_previous_terms(self):
        engine = InMemoryTraitEngine(genome_length=300)
        set_trait_landscape(engine, seed=1, number_epitopes=3)
        set_trait_landscape(engine, seed=2, number_epitopes=1)
        assert len(engine.coefficients[0]) == 1

    def test_fitness_updated_after_install(self):
        engine = InMemoryTraitEngine(genome_length=12, treatment=0.5)
        mutant = engine.add_genotype([0, 1])
        set_replication_landscape(
            engine, seed=1, **{**_ZERO_FRACTIONS, "lethal_fraction": 1.0}
        )
        assert engine.fitness[mutant] == pytest.approx(-1.6)

    def test_replication_rejects_traitnumber(self):
        with pytest.raises(ConfigurationError) as exc_info:
            set_replication_landscape(InMemoryTraitEngine(12), traitnumber=1)
        assert exc_info.value.parameter == "traitnumber"


class TestConfigurationErrors:
    def test_unknown_option(self):
        engine = InMemoryTraitEngine(genome_length=12)
        with pytest.raises(ConfigurationError) as exc_info:
            set_trait_landscape(engine, lethal_fraktion=0.1)
        assert exc_info.value.parameter == "lethal_fraktion"

    @pytest.mark.parametrize(
        "option", ["lethal_fraction", "deleterious_fraction", "adaptive_fraction", "env_fraction"]
    )
    def test_fraction_out_of_range(self, option):
        engine = InMemoryTraitEngine(genome_length=12)
        with pytest.raises(ConfigurationError) as exc_info:
            set_trait_landscape(engine, **{option: 1.5})
        assert exc_info.value.parameter == option

    def test_valleys_on_short_genome_leave_engine_untouched(self):
        engine = InMemoryTraitEngine(genome_length=12)
        engine.set_additive_trait([0.3] * 12, 0)

        with pytest.raises(ConfigurationError) as exc_info:
            set_trait_landscape(engine, seed=1, number_valleys=1)

        assert exc_info.value.parameter == "number_valleys"
        assert exc_info.value.trait == 0
        assert engine.additive[0] == [0.3] * 12

    def test_unknown_region(self):
        engine = InMemoryTraitEngine(genome_length=12, regions={})
        with pytest.raises(ConfigurationError) as exc_info:
            set_trait_landscape(engine, seed=1)
        assert exc_info.value.parameter == "region"

    def test_rng_and_seed_together(self):
        engine = InMemoryTraitEngine(genome_length=12)
        with pytest.raises(ConfigurationError) as exc_info:
            set_trait_landscape(engine, rng=random.Random(1), seed=1)
        assert exc_info.value.parameter == "seed"
        assert engine.additive[0] == [0.0] * 12

    def test_negative_count(self):
        with pytest.raises(ConfigurationError):
            set_trait_landscape(InMemoryTraitEngine(3000), number_epitopes=-1)
