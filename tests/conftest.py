"""Shared fixtures: keep every test away from the user's real config."""

import pytest

from grapher import config as config_module
from grapher.cli.commands import config_cmd

GRAPHER_ENV_VARS = (
    "GRAPHER_PAD_LENGTH",
    "GRAPHER_PAD_CHAR",
    "GRAPHER_UNPADDED_KEYS",
    "GRAPHER_DELIMITER",
    "GRAPHER_HEADER",
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    config_dir = tmp_path / "config"
    config_file = config_dir / "config.json"
    monkeypatch.setattr(config_module, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_file)
    monkeypatch.setattr(config_cmd, "CONFIG_FILE", config_file)
    for name in GRAPHER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    config_module.reset_config()
    yield config_file
    config_module.reset_config()
