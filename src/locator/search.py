"""Upward directory search for a named config file."""

import logging
import os
from pathlib import Path
from typing import Any

from src.locator.decoder import read_config
from src.locator.errors import ConfigError, ConfigNotFoundError
from src.locator.settings import LocatorSettings

logger = logging.getLogger(__name__)


def candidate_paths(settings: LocatorSettings, name: str) -> list[Path]:
    """List the locations tried for name, nearest first.

    The base path itself comes first, followed by one candidate per step up,
    ``settings.max_steps`` in total. Paths are normalized lexically, so
    stepping above the filesystem root stays at the root.
    """
    base = os.fspath(settings.base_path)
    offset = 1 if settings.skip_parent else 0

    candidates = [Path(os.path.normpath(os.path.join(base, name)))]
    for step in range(1, settings.max_steps + 1):
        ups = [os.pardir] * (step + offset)
        candidates.append(Path(os.path.normpath(os.path.join(base, *ups, name))))
    return candidates


def search(settings: LocatorSettings, name: str, destination: Any) -> Path:
    """Load the first candidate for name that exists and parses.

    Args:
        settings: Where to start and how far to climb.
        name: File name to look for.
        destination: Value the decoded file is applied to.

    Returns:
        Path of the file that was loaded.

    Raises:
        ConfigNotFoundError: If no candidate could be read and decoded.
    """
    attempts = []
    for path in candidate_paths(settings, name):
        try:
            read_config(path, destination)
        except ConfigError as e:
            logger.debug(f"Skipping {path}: {e}")
            attempts.append((path, e))
            continue

        logger.info(f"Loaded {name} from {path}")
        return path

    raise ConfigNotFoundError(name, attempts)
