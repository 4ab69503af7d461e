"""Tests for config loading, env overrides and the global singleton."""

import json

import pytest

from genoscape import config as config_module
from genoscape.config import (
    DefaultsConfig,
    GenoscapeConfig,
    configure,
    get_config,
    reset_config,
)


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    config_dir = tmp_path / "genoscape"
    monkeypatch.setattr(config_module, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_dir / "config.json")
    for name in (
        "GENOSCAPE_GENOME_LENGTH",
        "GENOSCAPE_SEED",
        "GENOSCAPE_TREATMENT",
        "GENOSCAPE_REGION",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield config_dir / "config.json"
    reset_config()


def test_defaults_without_file(isolated_config):
    config = GenoscapeConfig.load()
    assert config.defaults == DefaultsConfig()
    assert config.defaults.genome_length == 10000
    assert config.defaults.seed is None


def test_save_and_load_roundtrip(isolated_config):
    config = GenoscapeConfig(defaults=DefaultsConfig(genome_length=3000, seed=7))
    config.save()

    assert json.loads(isolated_config.read_text())["defaults"]["genome_length"] == 3000
    loaded = GenoscapeConfig.load()
    assert loaded.defaults.genome_length == 3000
    assert loaded.defaults.seed == 7


def test_env_overrides_file(isolated_config, monkeypatch):
    GenoscapeConfig(defaults=DefaultsConfig(genome_length=3000)).save()
    monkeypatch.setenv("GENOSCAPE_GENOME_LENGTH", "600")
    monkeypatch.setenv("GENOSCAPE_TREATMENT", "0.25")
    monkeypatch.setenv("GENOSCAPE_REGION", "gp120")

    config = GenoscapeConfig.load()
    assert config.defaults.genome_length == 600
    assert config.defaults.treatment == 0.25
    assert config.defaults.region == "gp120"


def test_invalid_env_value_is_ignored(isolated_config, monkeypatch, caplog):
    monkeypatch.setenv("GENOSCAPE_SEED", "not-a-number")
    with caplog.at_level("WARNING"):
        config = GenoscapeConfig.load()
    assert config.defaults.seed is None
    assert "GENOSCAPE_SEED" in caplog.text


def test_corrupt_file_falls_back_to_defaults(isolated_config, caplog):
    isolated_config.parent.mkdir(parents=True)
    isolated_config.write_text("{not json")
    with caplog.at_level("WARNING"):
        config = GenoscapeConfig.load()
    assert config.defaults == DefaultsConfig()
    assert "Failed to load config" in caplog.text


def test_configure_replaces_global(isolated_config):
    custom = GenoscapeConfig(defaults=DefaultsConfig(genome_length=12))
    configure(custom)
    assert get_config() is custom
    reset_config()
    assert get_config() is not custom


def test_wrong_typed_file_value_falls_back_to_defaults(isolated_config, caplog):
    isolated_config.parent.mkdir(parents=True)
    isolated_config.write_text(json.dumps({"defaults": {"seed": [1]}}))
    with caplog.at_level("WARNING"):
        config = get_config()
    assert config.defaults.seed is None
    assert "Failed to load config" in caplog.text
