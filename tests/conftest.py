"""Shared fixtures for the informer test-suite."""

import pytest

from informer import config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the configuration file at a temporary location for every test."""
    config_file = tmp_path / "informer.toml"
    monkeypatch.setattr(config, "CONFIG_FILE", config_file)
    return config_file
