"""Shared fixtures: keep the user's real config out of every test."""

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path_factory):
    for name in list(os.environ):
        if name.startswith("PTREE_"):
            monkeypatch.delenv(name)
    config_home = tmp_path_factory.mktemp("config-home")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home
