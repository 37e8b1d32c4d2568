# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Symbol registry mapping enumeration constants to names."""

from schematype.registry.fetch import fetch_registry_document
from schematype.registry.symbols import (
    SymbolRegistry,
    build_registry,
    extract_enum_values,
    get_default_registry,
    reset_default_registry,
    set_default_registry,
)

__all__ = [
    "SymbolRegistry",
    "build_registry",
    "extract_enum_values",
    "fetch_registry_document",
    "get_default_registry",
    "reset_default_registry",
    "set_default_registry",
]
