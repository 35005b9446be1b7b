"""Normalization, merging and loading of mock configurations."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from mock_helper.models import MethodNames

logger = logging.getLogger(__name__)

Configuration = dict[str, Any]

_NUMERIC = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


class ConfigurationError(ValueError):
    """Raised when a configuration source does not hold a mapping."""


def _is_numeric(key: object) -> bool:
    """Return ``True`` for integer/float keys and strings that parse as numbers."""
    if isinstance(key, bool):
        return False
    if isinstance(key, (int, float)):
        return True
    if isinstance(key, str):
        return _NUMERIC.match(key) is not None
    return False


def _iter_method_entries(methods: Any) -> list[tuple[Any, Any]]:
    """Flatten a ``methods`` value into ``(key, value)`` pairs.

    A list item that is a mapping contributes its own ``name: value`` pairs;
    any other list item is a plain method name under its index.
    """
    if isinstance(methods, Mapping):
        return list(methods.items())

    entries: list[tuple[Any, Any]] = []
    for index, item in enumerate(methods):
        if isinstance(item, Mapping):
            entries.extend(item.items())
        else:
            entries.append((index, item))
    return entries


def normalize_configuration(config: Mapping[str, Any] | None = None) -> Configuration:
    """Return the canonical form of *config* without modifying it.

    Args:
        config: A configuration using any of the shorthand keys.

    Returns:
        A new mapping where ``will_return`` and ``will`` are always present,
        ``methods`` maps every method name to itself and the ``constructor``
        alias has been folded into ``disable_original_constructor``.
    """
    result: Configuration = dict(config or {})
    result["will_return"] = dict(result.get("will_return") or {})

    methods = result.get("methods")
    if (
        methods
        and not isinstance(methods, (MethodNames, str, bytes))
        and isinstance(methods, (Mapping, list, tuple))
    ):
        names: list[Any] = []
        for key, value in _iter_method_entries(methods):
            if _is_numeric(key):
                names.append(value)
            else:
                names.append(key)
                result["will_return"][key] = value
        result["methods"] = MethodNames.of(names)

    result["will"] = dict(result.get("will") or {})

    # None counts as unset for both flags.
    if result.get("disable_original_constructor") is None:
        result.pop("disable_original_constructor", None)
    constructor = result.pop("constructor", None)
    if constructor is not None and "disable_original_constructor" not in result:
        result["disable_original_constructor"] = not constructor

    return result


def _is_collection(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def _as_dict(value: Any) -> dict[Any, Any]:
    if isinstance(value, Mapping):
        return dict(value)
    return dict(enumerate(value))


def _merge_values(base: Any, override: Any) -> Any:
    """Merge two collections the way PHP's ``array_replace_recursive`` does.

    Lists merge by index, mappings by key; a value that is not a collection on
    either side is replaced by *override*.
    """
    if not (_is_collection(base) and _is_collection(override)):
        return override

    if not isinstance(base, Mapping) and not isinstance(override, Mapping):
        merged_list = list(base)
        for index, value in enumerate(override):
            if index < len(merged_list):
                merged_list[index] = _merge_values(merged_list[index], value)
            else:
                merged_list.append(value)
        return merged_list

    merged = _as_dict(base)
    for key, value in _as_dict(override).items():
        merged[key] = _merge_values(merged[key], value) if key in merged else value
    if isinstance(base, MethodNames) or isinstance(override, MethodNames):
        return MethodNames(merged)
    return merged


def merge_configurations(*configurations: Mapping[str, Any]) -> Configuration:
    """Merge configurations left to right.

    Later values win. Mappings and lists present on both sides merge
    recursively, lists by index, so an empty later collection keeps the
    earlier one.
    """
    if not configurations:
        return normalize_configuration({})
    if len(configurations) == 1:
        return dict(configurations[0])

    merged: Configuration = dict(configurations[0])
    for configuration in configurations[1:]:
        merged = _merge_values(merged, configuration)
    return merged


def load_configuration(config_path: str | Path) -> Configuration:
    """Load one configuration from a YAML or JSON file."""
    path = Path(config_path)
    raw_text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in (".yaml", ".yml"):
        data = yaml.safe_load(raw_text)
    else:
        data = json.loads(raw_text)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"{path} must contain a mapping at the top level, got {type(data).__name__}"
        )
    logger.debug("Loaded mock configuration from %s: %s", path, sorted(data))
    return data


__all__ = [
    "Configuration",
    "ConfigurationError",
    "load_configuration",
    "merge_configurations",
    "normalize_configuration",
]
