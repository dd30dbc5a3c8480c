"""Immutable settings describing where and how to look for config files."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

DEFAULT_CONFIG_NAME = "config.yaml"
DEFAULT_OVERRIDES_NAME = "overrides.yaml"
DEFAULT_BASE_PATH = "."
DEFAULT_MAX_STEPS = 5

ENV_CONFIG_NAME = "CONFIG_LOCATOR_NAME"
ENV_OVERRIDES_NAME = "CONFIG_LOCATOR_OVERRIDES_NAME"
ENV_BASE_PATH = "CONFIG_LOCATOR_BASE_PATH"
ENV_MAX_STEPS = "CONFIG_LOCATOR_MAX_STEPS"


@dataclass(frozen=True)
class LocatorSettings:
    """Search parameters shared by every load call of a Loader."""
    config_name: str = DEFAULT_CONFIG_NAME
    overrides_name: str = DEFAULT_OVERRIDES_NAME
    base_path: str | Path = DEFAULT_BASE_PATH  # relative paths resolve against the cwd at search time
    max_steps: int = DEFAULT_MAX_STEPS
    skip_parent: bool = False  # first step up jumps two levels, as older releases did

    def __post_init__(self):
        for attr in ("config_name", "overrides_name"):
            value = getattr(self, attr)
            if not isinstance(value, str) or not value:
                raise ValueError(f"{attr} must be a non-empty string, got {value!r}")
        if isinstance(self.max_steps, bool) or not isinstance(self.max_steps, int):
            raise ValueError(f"max_steps must be an integer, got {self.max_steps!r}")
        if self.max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {self.max_steps}")

    def with_base_path(self, base_path: str | Path) -> "LocatorSettings":
        """Return a copy searching from a different starting directory."""
        return replace(self, base_path=base_path)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides) -> "LocatorSettings":
        """Build settings from CONFIG_LOCATOR_* environment variables.

        Keyword arguments take precedence over the environment, which takes
        precedence over the built-in defaults.

        Args:
            environ: Mapping to read instead of os.environ.
            **overrides: Explicit field values.

        Returns:
            A validated LocatorSettings instance.
        """
        if environ is None:
            environ = os.environ

        values = {}
        if environ.get(ENV_CONFIG_NAME):
            values["config_name"] = environ[ENV_CONFIG_NAME]
        if environ.get(ENV_OVERRIDES_NAME):
            values["overrides_name"] = environ[ENV_OVERRIDES_NAME]
        if environ.get(ENV_BASE_PATH):
            values["base_path"] = environ[ENV_BASE_PATH]
        if environ.get(ENV_MAX_STEPS):
            raw = environ[ENV_MAX_STEPS]
            try:
                values["max_steps"] = int(raw)
            except ValueError:
                raise ValueError(f"{ENV_MAX_STEPS} must be an integer, got {raw!r}") from None

        values.update(overrides)
        return cls(**values)
