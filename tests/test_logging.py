"""Tests for logging hygiene in the landscape pipeline."""

import pytest

from genoscape.engine import InMemoryTraitEngine
from genoscape.landscape import set_trait_landscape
from genoscape.landscape.assembler import CollaboratorInstallError, install_landscape
from genoscape.core.models import EpistaticTerm, TraitLandscape


def test_build_logs_instead_of_print(capsys, caplog):
    engine = InMemoryTraitEngine(genome_length=300)

    with caplog.at_level("INFO", logger="genoscape"):
        set_trait_landscape(engine, seed=3, number_epitopes=2)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
    assert "Trait 0:" in caplog.text
    assert "Installed trait 0 (replication)" in caplog.text


def test_rejected_install_is_logged(caplog):
    class RejectingEngine(InMemoryTraitEngine):
        def add_trait_coefficient(self, value, loci, trait):
            raise ValueError("coefficient table full")

    engine = RejectingEngine(genome_length=12)
    landscape = TraitLandscape(
        trait=0,
        effects=[0.0] * 12,
        terms=[EpistaticTerm(loci=(1, 4), value=0.1)],
    )

    with caplog.at_level("WARNING", logger="genoscape"):
        with pytest.raises(CollaboratorInstallError):
            install_landscape(engine, landscape)

    assert "Engine rejected trait 0 install" in caplog.text
