"""Exceptions raised while locating and reading configuration files."""

from pathlib import Path


class ConfigError(Exception):
    """Base class for all config locator errors."""


class ConfigReadError(ConfigError):
    """A candidate file does not exist or could not be read."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"couldn't read config: {cause}")


class ConfigParseError(ConfigError):
    """A candidate file was read but its content could not be decoded."""

    def __init__(self, message: str, path: Path | None = None):
        self.path = path
        super().__init__(f"couldn't unmarshal config: {message}")


class ConfigNotFoundError(ConfigError):
    """Every candidate location for a config file failed."""

    def __init__(self, name: str, attempts: list[tuple[Path, ConfigError]]):
        self.name = name
        self.attempts = attempts
        self.last_error = attempts[-1][1] if attempts else None
        super().__init__(f"failed to find a valid {name!r}: {self.last_error}")
