# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point of the resolution engine.

The dispatcher inspects the shape of a schema node and routes it to exactly
one of the scalar, array or dictionary resolvers. Resolution performs no I/O
except for the one-time build of the default symbol registry, and may be run
concurrently from several threads.
"""

from __future__ import annotations

from schematype.config import ResolverConfig
from schematype.errors import NotATypeSchemaError, UnsupportedShapeError
from schematype.model.descriptors import TypeDescriptor
from schematype.model.schema import SchemaNode
from schematype.registry.symbols import SymbolRegistry
from schematype.resolver.array import resolve_array
from schematype.resolver.context import ResolutionContext
from schematype.resolver.dictionary import resolve_dictionary
from schematype.resolver.scalar import resolve_scalar

# ###############
# Public Interface
# ###############


def resolve(
    name: str,
    node: SchemaNode,
    *,
    registry: SymbolRegistry | None = None,
    config: ResolverConfig | None = None,
) -> TypeDescriptor:
    """Resolve the type a schema node denotes.

    Args:
        name: Nominal base name, used if an enumeration must be synthesized.
        node: The schema node. References must have been dereferenced.
        registry: Pre-built symbol registry for integer enumerations. When
            omitted, the process-wide default registry is built on first need.
        config: Naming and registry settings; defaults to :class:`ResolverConfig`.

    Returns:
        The resolved :class:`TypeDescriptor`.

    Raises:
        UnsupportedShapeError: If the node is a reference or has an unresolvable shape.
        NotATypeSchemaError: If the node carries no type tags.
        ResolutionError: Any error raised by the resolver the node is routed to.
    """
    context = ResolutionContext(registry=registry, config=config or ResolverConfig())
    return resolve_with_context(name, node, context)


def resolve_with_context(name: str, node: SchemaNode, context: ResolutionContext) -> TypeDescriptor:
    """Resolve *node* using an existing :class:`ResolutionContext`."""
    if node.reference is not None:
        raise UnsupportedShapeError(f"'{name}': de-referencing '{node.reference}' is not supported here")

    if not node.type:
        raise NotATypeSchemaError(f"'{name}': this schema does not represent a type")

    if node.dictionary_value_type is None:
        if len(node.type) == 1 and not node.type[0].is_reference and node.type[0].name == "array":
            return resolve_array(name, node, context)
        return resolve_scalar(name, node, context)

    if len(node.type) == 1 and not node.type[0].is_reference and node.type[0].name == "object":
        return resolve_dictionary(name, node, context)

    tags = ", ".join(tag.name for tag in node.type)
    raise UnsupportedShapeError(f"'{name}': dictionary value schema on a [{tags}] schema is not supported")
