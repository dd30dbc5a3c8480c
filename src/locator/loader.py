"""Primary config loading with optional local overrides."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from src.locator.errors import ConfigError, ConfigNotFoundError
from src.locator.search import candidate_paths, search
from src.locator.settings import LocatorSettings

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """Which files a load call used."""
    config_path: Path
    overrides_path: Path | None = None
    overrides_error: ConfigNotFoundError | None = None  # set when no overrides file was applied

    @property
    def has_overrides(self) -> bool:
        return self.overrides_path is not None


class Loader:
    """Finds config.yaml (and optionally overrides.yaml) above a base path."""

    def __init__(
        self,
        settings: LocatorSettings | None = None,
        on_overrides_error: Callable[[ConfigNotFoundError], None] | None = None,
    ):
        """
        Args:
            settings: Search parameters. Defaults to LocatorSettings().
            on_overrides_error: Called with the search error when no usable
                overrides file exists. The error is never raised.
        """
        self.settings = settings or LocatorSettings()
        self.on_overrides_error = on_overrides_error

    def candidates(self, name: str) -> list[Path]:
        """Return the paths that would be tried for name."""
        return candidate_paths(self.settings, name)

    def search(self, name: str, destination: Any) -> Path:
        """Load the nearest valid file called name into destination."""
        return search(self.settings, name, destination)

    def load(self, destination: Any) -> LoadResult:
        """Populate destination from the primary file, then any overrides.

        Args:
            destination: Mapping, dataclass instance or plain object that is
                updated in place.

        Returns:
            LoadResult describing the files that were applied.

        Raises:
            ConfigNotFoundError: If the primary file can't be found or parsed.
        """
        config_path = self.search(self.settings.config_name, destination)
        result = LoadResult(config_path=config_path)

        try:
            result.overrides_path = self.search(self.settings.overrides_name, destination)
        except ConfigNotFoundError as e:
            logger.debug(f"No overrides applied: {e}")
            result.overrides_error = e
            if self.on_overrides_error is not None:
                self.on_overrides_error(e)

        return result

    def must_load(self, destination: Any) -> LoadResult:
        """Like load, but exit the process if the primary file is missing."""
        try:
            return self.load(destination)
        except ConfigError as e:
            raise SystemExit(f"FATAL: {e}") from e


def load(
    destination: Any,
    settings: LocatorSettings | None = None,
    on_overrides_error: Callable[[ConfigNotFoundError], None] | None = None,
) -> LoadResult:
    """Load config into destination using a one-off Loader."""
    return Loader(settings, on_overrides_error=on_overrides_error).load(destination)


def must_load(destination: Any, settings: LocatorSettings | None = None) -> LoadResult:
    """Load config into destination, exiting with a FATAL message on failure."""
    return Loader(settings).must_load(destination)
