"""Tests for locator settings."""

from pathlib import Path

import pytest

from src.locator.settings import LocatorSettings


def test_defaults():
    """Test the default search parameters."""
    settings = LocatorSettings()
    assert settings.config_name == "config.yaml"
    assert settings.overrides_name == "overrides.yaml"
    assert settings.base_path == "."
    assert settings.max_steps == 5
    assert settings.skip_parent is False


def test_settings_are_immutable():
    """Test that settings can't be changed after construction."""
    settings = LocatorSettings()
    with pytest.raises(AttributeError):
        settings.max_steps = 1


def test_with_base_path():
    """Test copying settings with a new base path."""
    settings = LocatorSettings(max_steps=2)
    moved = settings.with_base_path(Path("/tmp"))
    assert moved.base_path == Path("/tmp")
    assert moved.max_steps == 2
    assert settings.base_path == "."


@pytest.mark.parametrize("max_steps", [-1, 1.5, "3", True])
def test_invalid_max_steps(max_steps):
    """Test that max_steps must be a non-negative integer."""
    with pytest.raises(ValueError):
        LocatorSettings(max_steps=max_steps)


def test_empty_name_rejected():
    """Test that file names can't be empty."""
    with pytest.raises(ValueError, match="config_name"):
        LocatorSettings(config_name="")


def test_from_env():
    """Test reading settings from environment variables."""
    environ = {
        "CONFIG_LOCATOR_NAME": "app.yaml",
        "CONFIG_LOCATOR_OVERRIDES_NAME": "app.local.yaml",
        "CONFIG_LOCATOR_BASE_PATH": "/srv/app",
        "CONFIG_LOCATOR_MAX_STEPS": "2",
    }
    settings = LocatorSettings.from_env(environ)
    assert settings == LocatorSettings("app.yaml", "app.local.yaml", "/srv/app", 2)


def test_from_env_keyword_overrides_win():
    """Test that explicit keywords take precedence over the environment."""
    settings = LocatorSettings.from_env({"CONFIG_LOCATOR_MAX_STEPS": "2"}, max_steps=0)
    assert settings.max_steps == 0


def test_from_env_defaults(monkeypatch):
    """Test that unset variables fall back to defaults."""
    monkeypatch.delenv("CONFIG_LOCATOR_NAME", raising=False)
    monkeypatch.delenv("CONFIG_LOCATOR_OVERRIDES_NAME", raising=False)
    monkeypatch.delenv("CONFIG_LOCATOR_BASE_PATH", raising=False)
    monkeypatch.setenv("CONFIG_LOCATOR_MAX_STEPS", "7")
    settings = LocatorSettings.from_env()
    assert settings.config_name == "config.yaml"
    assert settings.max_steps == 7


def test_from_env_bad_max_steps():
    """Test that a non-numeric step count is reported."""
    with pytest.raises(ValueError, match="CONFIG_LOCATOR_MAX_STEPS"):
        LocatorSettings.from_env({"CONFIG_LOCATOR_MAX_STEPS": "many"})
