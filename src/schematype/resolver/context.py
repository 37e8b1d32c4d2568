# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Settings and collaborators shared by the resolvers during one call."""

from __future__ import annotations

from dataclasses import dataclass, field

from schematype.config import ResolverConfig
from schematype.registry.symbols import SymbolRegistry, get_default_registry
from schematype.resolver.naming import enum_type_name, type_name_from_title

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ResolutionContext:
    """Read-only state for a resolution call.

    Attributes:
        registry: Pre-built symbol registry. When None, the process-wide
            default registry is used, and only built if a lookup is needed.
        config: Naming and registry settings.
    """

    registry: SymbolRegistry | None = None
    config: ResolverConfig = field(default_factory=ResolverConfig)

    def symbols(self) -> SymbolRegistry:
        """Return the registry to use for symbol lookups."""
        if self.registry is not None:
            return self.registry
        return get_default_registry(self.config)

    def enum_name(self, name: str) -> str:
        return enum_type_name(name, self.config.enum_suffix)

    def object_name(self, title: str) -> str:
        return type_name_from_title(title)
