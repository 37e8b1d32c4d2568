# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the resolver configuration file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

DEFAULT_REGISTRY_URL = "https://raw.githubusercontent.com/KhronosGroup/OpenGL-Registry/main/xml/gl.xml"
DEFAULT_SYMBOL_PREFIX = "GL_"
DEFAULT_ENUM_SUFFIX = "Enum"
DEFAULT_FETCH_TIMEOUT = 60.0


class ResolverConfigError(Exception):
    """Raised when a resolver configuration file is invalid or cannot be loaded."""


@dataclass(frozen=True)
class ResolverConfig:
    """Settings shared by the resolvers and the symbol registry.

    Attributes:
        registry_url: Location of the enumeration-constant document. Either an
            ``http(s)://`` URL, a ``file://`` URL or a filesystem path.
        symbol_prefix: Prefix stripped from every constant name in the registry.
        enum_suffix: Suffix appended to the nominal name of a synthesized enum.
        fetch_timeout: Timeout in seconds for fetching the registry document.
    """

    registry_url: str = DEFAULT_REGISTRY_URL
    symbol_prefix: str = DEFAULT_SYMBOL_PREFIX
    enum_suffix: str = DEFAULT_ENUM_SUFFIX
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT


def load_resolver_config(path: Path) -> ResolverConfig:
    """Load and parse a resolver configuration file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A ResolverConfig instance populated from the file. Keys missing from
        the file keep their defaults.

    Raises:
        ResolverConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ResolverConfigError(f"Resolver config file not found: {path}") from None
    except OSError as exc:
        raise ResolverConfigError(f"Cannot read resolver config file: {exc}") from exc

    return _parse_resolver_config(text, source_label=str(path))


# ################
# Implementation
# ################

_STRING_KEYS = {
    "registry-url": "registry_url",
    "symbol-prefix": "symbol_prefix",
    "enum-suffix": "enum_suffix",
}


def _parse_resolver_config(text: str, source_label: str = "<string>") -> ResolverConfig:
    """Parse resolver config YAML text into a ResolverConfig.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        ResolverConfigError: If the YAML is invalid or a field has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ResolverConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return ResolverConfig()
    if not isinstance(data, dict):
        raise ResolverConfigError(f"{source_label}: resolver config must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _STRING_KEYS and key != "fetch-timeout")
    if unknown:
        raise ResolverConfigError(f"{source_label}: unknown field(s): {', '.join(unknown)}")

    values: dict[str, object] = {}
    for key, attribute in _STRING_KEYS.items():
        if key in data:
            values[attribute] = _require_string(data, key, source_label)

    if "fetch-timeout" in data:
        timeout = data["fetch-timeout"]
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ResolverConfigError(f"{source_label}: 'fetch-timeout' must be a positive number")
        values["fetch_timeout"] = float(timeout)

    return ResolverConfig(**values)  # type: ignore[arg-type]


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a string field from a mapping, raising ResolverConfigError on a wrong type."""
    value = mapping[key]
    if not isinstance(value, str):
        raise ResolverConfigError(f"{source_label}: '{key}' must be a string")
    return value
