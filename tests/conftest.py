"""Pytest fixtures for tests."""

from pathlib import Path

import pytest

from chatroster.colors import hex_to_color
from chatroster.models import AccessLevel, AppConfig, Palette, User


@pytest.fixture
def palette():
    """The built-in palette."""
    return Palette.default()


@pytest.fixture
def error_red():
    """A clearly chromatic color."""
    return hex_to_color("#e06b75")


@pytest.fixture
def info_yellow():
    """A second chromatic color with a different hue."""
    return hex_to_color("#f5d76e")


@pytest.fixture
def config_path(tmp_path) -> Path:
    """Location for a config file that does not exist yet."""
    return tmp_path / "config.json"


@pytest.fixture
def saved_config(config_path) -> Path:
    """A config file holding the defaults."""
    AppConfig().save(config_path)
    return config_path


@pytest.fixture
def roster():
    """A small channel with mixed access levels and nickname casing."""
    return [
        User.new("zeta", "z", "zeta.example", access_levels=[AccessLevel.OWNER]),
        User.new("alpha", access_levels=[]),
        User.new("Alpha", "a", "owner.example", access_levels=[AccessLevel.OWNER]),
        User.new("mike", access_levels=[AccessLevel.VOICE]),
        User.new("Bravo", access_levels=[AccessLevel.VOICE, AccessLevel.OPER]),
    ]
