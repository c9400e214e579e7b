"""File-based walker settings.

Only the data-like part of a walker configuration lives in a file; hooks and
overrides are code and stay with the caller.

Example ``walker.yaml``::

    keep_empty: false
    keep_order: true
    max_depth: 5            # null → unbounded
    depth_overrides:
      methods: 0
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Optional

import yaml

from .core import ConfigurationError
from .depth import DEFAULT_MAX_DEPTH
from .paths import is_valid_path

_KNOWN_KEYS = frozenset({"keep_empty", "keep_order", "max_depth", "depth_overrides"})


@dataclass(frozen=True)
class WalkerSettings:
    """Normalized walker flags and depth bounds."""

    keep_empty: bool = False
    keep_order: bool = False
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH
    depth_overrides: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))


def load_settings(path: Path | str) -> WalkerSettings:
    """Load and validate a YAML settings file."""
    settings_path = Path(path)
    if not settings_path.exists():
        raise ConfigurationError(f"Settings file not found: {settings_path}")

    text = settings_path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse settings file: {exc}") from exc

    return settings_from_mapping({} if parsed is None else parsed)


def settings_from_mapping(data: Any) -> WalkerSettings:
    """Validate an already parsed settings mapping."""
    if not isinstance(data, Mapping):
        raise ConfigurationError("Settings root must be a mapping.")
    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown settings keys: {', '.join(unknown)}")

    return WalkerSettings(
        keep_empty=_require_bool(data.get("keep_empty", False), "keep_empty"),
        keep_order=_require_bool(data.get("keep_order", False), "keep_order"),
        max_depth=_parse_max_depth(data.get("max_depth", DEFAULT_MAX_DEPTH)),
        depth_overrides=_parse_depth_overrides(data.get("depth_overrides")),
    )


def _require_bool(value: Any, label: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{label} must be a boolean.")
    return value


def _parse_max_depth(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError("max_depth must be an integer or null.")
    return value


def _parse_depth_overrides(value: Any) -> Mapping[str, int]:
    if value is None:
        return MappingProxyType({})
    if not isinstance(value, Mapping):
        raise ConfigurationError("depth_overrides must be a mapping of path to depth.")
    parsed: dict[str, int] = {}
    for path, depth in value.items():
        if not is_valid_path(path):
            raise ConfigurationError(f"depth_overrides: invalid path {path!r}.")
        if isinstance(depth, bool) or not isinstance(depth, int) or depth < 0:
            raise ConfigurationError(f"depth_overrides.{path} must be a non-negative integer.")
        parsed[path] = depth
    return MappingProxyType(parsed)
