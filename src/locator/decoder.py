"""YAML decoding and in-place application onto caller-owned values."""

import copy
import dataclasses
import enum
from collections.abc import Mapping, MutableMapping
from pathlib import Path
from typing import Any

import yaml

from src.locator.errors import ConfigParseError, ConfigReadError

FIELD_KEY = "yaml"  # dataclass field metadata key naming the input key


def decode(data: bytes | str, source: Path | None = None) -> dict:
    """Parse a YAML document into a mapping.

    An empty document decodes to an empty mapping.

    Raises:
        ConfigParseError: If the text is not valid YAML or its top level is
            not a mapping.
    """
    try:
        values = yaml.safe_load(data)
    except yaml.YAMLError as e:
        raise ConfigParseError(str(e), path=source) from e

    if values is None:
        return {}
    if not isinstance(values, Mapping):
        raise ConfigParseError(
            f"expected a mapping at the top level, got {type(values).__name__}",
            path=source,
        )
    return dict(values)


def merge_configs(base: dict, override: dict) -> dict:
    """Deep-merge two config dicts (override takes precedence)."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value
    return result


def apply(destination: Any, values: Mapping, source: Path | None = None) -> None:
    """Apply decoded values onto destination in place.

    Keys present in values overwrite the destination; keys missing from
    values leave the destination untouched. Keys the destination does not
    know about are ignored (except for mappings, which accept any key).

    Args:
        destination: A mutable mapping, a dataclass instance, or any object
            with a ``__dict__``.
        values: Decoded mapping.
        source: File the values came from, used in error messages.
    """
    if isinstance(destination, MutableMapping):
        _merge_into_mapping(destination, values)
    elif dataclasses.is_dataclass(destination) and not isinstance(destination, type):
        _apply_to_dataclass(destination, values, source)
    elif hasattr(destination, "__dict__") and not isinstance(destination, type):
        _apply_to_object(destination, values, source)
    else:
        raise TypeError(f"Unsupported config destination: {type(destination).__name__}")


def read_config(path: Path, destination: Any) -> None:
    """Read, decode and apply a single config file.

    Raises:
        ConfigReadError: If the file can't be read.
        ConfigParseError: If the content can't be decoded into destination.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ConfigReadError(path, e) from e

    apply(destination, decode(data, source=path), source=path)


def _merge_into_mapping(destination: MutableMapping, values: Mapping):
    for key, value in values.items():
        current = destination.get(key)
        if isinstance(current, MutableMapping) and isinstance(value, Mapping):
            _merge_into_mapping(current, value)
        else:
            # YAML aliases share objects; each stored value gets its own copy.
            destination[key] = copy.deepcopy(value)


def _apply_to_dataclass(destination: Any, values: Mapping, source: Path | None):
    for f in dataclasses.fields(destination):
        key = f.metadata.get(FIELD_KEY, f.name)
        if key not in values:
            continue
        _assign(destination, f.name, values[key], source)


def _apply_to_object(destination: Any, values: Mapping, source: Path | None):
    for key, value in values.items():
        if not isinstance(key, str) or key.startswith("_") or key not in vars(destination):
            continue
        _assign(destination, key, value, source)


def _assign(destination: Any, attr: str, value: Any, source: Path | None):
    """Set one attribute, descending into nested structured values."""
    current = getattr(destination, attr, None)

    if value is None:
        _set(destination, attr, value, source)
        return

    if isinstance(current, MutableMapping):
        if isinstance(value, Mapping):
            _merge_into_mapping(current, value)
        else:
            raise ConfigParseError(
                f"field {attr!r} expects a mapping, got {type(value).__name__}", path=source
            )
        return

    nested = dataclasses.is_dataclass(current) and not isinstance(current, type)
    if nested or (current is not None and hasattr(current, "__dict__") and _is_plain_object(current)):
        if not isinstance(value, Mapping):
            raise ConfigParseError(
                f"field {attr!r} expects a mapping, got {type(value).__name__}", path=source
            )
        apply(current, value, source)
        return

    _set(destination, attr, copy.deepcopy(value), source)


def _set(destination: Any, attr: str, value: Any, source: Path | None):
    try:
        setattr(destination, attr, value)
    except (AttributeError, TypeError) as e:
        raise ConfigParseError(f"can't set field {attr!r}: {e}", path=source) from e


def _is_plain_object(value: Any) -> bool:
    # Scalars, containers and callables are replaced wholesale.
    return not isinstance(value, (str, bytes, int, float, bool, list, tuple, set, type, enum.Enum, Path)) and not callable(value)
