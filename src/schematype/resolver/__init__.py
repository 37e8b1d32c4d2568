# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema-to-type resolution: dispatcher, scalar, array and dictionary resolvers."""

from schematype.resolver.array import resolve_array
from schematype.resolver.context import ResolutionContext
from schematype.resolver.dictionary import resolve_dictionary
from schematype.resolver.dispatch import resolve, resolve_with_context
from schematype.resolver.naming import enum_type_name, type_name_from_title
from schematype.resolver.scalar import resolve_scalar

__all__ = [
    "resolve",
    "resolve_with_context",
    "resolve_scalar",
    "resolve_array",
    "resolve_dictionary",
    "ResolutionContext",
    "enum_type_name",
    "type_name_from_title",
]
