# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Resolve JSON-Schema-like nodes into type descriptors for code generation."""

from schematype.config import ResolverConfig, load_resolver_config
from schematype.errors import (
    InvalidDefaultError,
    MissingItemTypeError,
    NotATypeSchemaError,
    RegistryUnavailableError,
    ResolutionError,
    UnknownSymbolError,
    UnsupportedFeatureError,
    UnsupportedShapeError,
)
from schematype.model import SchemaNode, TypeDescriptor
from schematype.registry import SymbolRegistry
from schematype.resolver import resolve

__all__ = [
    "resolve",
    "SchemaNode",
    "TypeDescriptor",
    "SymbolRegistry",
    "ResolverConfig",
    "load_resolver_config",
    "ResolutionError",
    "UnsupportedShapeError",
    "NotATypeSchemaError",
    "MissingItemTypeError",
    "UnsupportedFeatureError",
    "InvalidDefaultError",
    "RegistryUnavailableError",
    "UnknownSymbolError",
]
