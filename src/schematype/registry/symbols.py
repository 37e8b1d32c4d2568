# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Registry mapping numeric enumeration constants to their symbolic names.

The registry is built from a nested markup document in which constant
definitions are ``<enum name="..." value="..."/>`` elements at any depth.
Names are stored with a fixed prefix stripped, keyed by value: when several
names share a value, the one appearing last in the document wins.

A process-wide default registry is built lazily on first use, at most once,
under a lock. Callers that need determinism can build a registry themselves
and pass it to :func:`schematype.resolver.resolve`, or install it with
:func:`set_default_registry`.
"""

from __future__ import annotations

import logging
import threading
import xml.etree.ElementTree as ET
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from schematype.config import DEFAULT_SYMBOL_PREFIX, ResolverConfig
from schematype.errors import RegistryUnavailableError, UnknownSymbolError
from schematype.registry.fetch import fetch_registry_document

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class SymbolRegistry:
    """Immutable mapping from 64-bit constant values to stripped names."""

    def __init__(self, symbols: Mapping[int, str]) -> None:
        self._symbols: Mapping[int, str] = MappingProxyType(dict(symbols))

    @classmethod
    def from_element(cls, root: ET.Element, *, prefix: str = DEFAULT_SYMBOL_PREFIX) -> SymbolRegistry:
        """Build a registry from a parsed document tree.

        Raises:
            RegistryUnavailableError: If a constant value is neither decimal nor hexadecimal.
        """
        values: dict[int, str] = {}
        try:
            extract_enum_values(values, root, prefix)
        except ValueError as exc:
            raise RegistryUnavailableError(f"Malformed constant in symbol registry: {exc}") from exc
        return cls(values)

    @classmethod
    def from_xml(cls, text: str, *, prefix: str = DEFAULT_SYMBOL_PREFIX) -> SymbolRegistry:
        """Build a registry from the text of an XML document.

        Raises:
            RegistryUnavailableError: If the document cannot be parsed.
        """
        try:
            root = ET.fromstring(text)
        except ET.ParseError as exc:
            raise RegistryUnavailableError(f"Cannot parse symbol registry document: {exc}") from exc
        return cls.from_element(root, prefix=prefix)

    def lookup(self, value: int) -> str:
        """Return the stripped name registered for *value*.

        Raises:
            UnknownSymbolError: If no constant with *value* exists.
        """
        try:
            return self._symbols[value]
        except KeyError:
            raise UnknownSymbolError(value) from None

    def __contains__(self, value: object) -> bool:
        return value in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[int]:
        return iter(self._symbols)


def extract_enum_values(values: dict[int, str], parent: ET.Element, prefix: str) -> None:
    """Record every constant definition below *parent* into *values*.

    Each child is descended into before it is inspected itself. A child counts
    as a constant definition when its tag is ``enum`` and it carries at least
    two attributes, of which ``name`` and ``value`` must both be present.

    Raises:
        ValueError: If a ``value`` attribute parses as neither decimal nor hexadecimal.
    """
    for node in parent:
        extract_enum_values(values, node, prefix)
        if node.tag != "enum" or len(node.attrib) < 2:
            continue
        name = node.get("name")
        raw_value = node.get("value")
        if name is None or raw_value is None:
            continue
        values[_parse_constant(raw_value)] = name.removeprefix(prefix)


def get_default_registry(config: ResolverConfig | None = None) -> SymbolRegistry:
    """Return the process-wide registry, building it on first use.

    The build fetches the document named by ``config.registry_url`` exactly
    once; concurrent callers block until it completes. A failed build is not
    cached, so a later call starts a new build.

    Raises:
        RegistryUnavailableError: If the document cannot be fetched or parsed.
    """
    global _default_registry
    registry = _default_registry
    if registry is not None:
        return registry
    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = build_registry(config or ResolverConfig())
        return _default_registry


def set_default_registry(registry: SymbolRegistry) -> None:
    """Install a pre-built registry as the process-wide default."""
    global _default_registry
    with _default_registry_lock:
        _default_registry = registry


def reset_default_registry() -> None:
    """Forget the process-wide registry so that the next use rebuilds it."""
    global _default_registry
    with _default_registry_lock:
        _default_registry = None


def build_registry(config: ResolverConfig) -> SymbolRegistry:
    """Fetch the document named by *config* and build a registry from it."""
    text = fetch_registry_document(config.registry_url, timeout=config.fetch_timeout)
    registry = SymbolRegistry.from_xml(text, prefix=config.symbol_prefix)
    logger.info("Symbol registry built with %d constants", len(registry))
    return registry


# ################
# Implementation
# ################

_default_registry: SymbolRegistry | None = None
_default_registry_lock = threading.Lock()

_INT64_RANGE = 1 << 64
_INT64_MAX = (1 << 63) - 1


def _parse_constant(raw_value: str) -> int:
    """Parse a constant as decimal, falling back to hexadecimal, wrapped to signed 64 bits."""
    try:
        value = int(raw_value, 10)
    except ValueError:
        value = int(raw_value, 16)
    value %= _INT64_RANGE
    if value > _INT64_MAX:
        value -= _INT64_RANGE
    return value
