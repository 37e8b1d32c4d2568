# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Resolution of string-keyed map schema nodes."""

from __future__ import annotations

from schematype.errors import NotATypeSchemaError, UnsupportedFeatureError
from schematype.model.descriptors import MapTypeRef, ObjectTypeRef, ScalarKind, TypeDescriptor, primitive
from schematype.model.schema import SchemaNode
from schematype.resolver.context import ResolutionContext

# ###############
# Public Interface
# ###############


def resolve_dictionary(name: str, node: SchemaNode, context: ResolutionContext) -> TypeDescriptor:
    """Resolve an ``object`` node carrying a dictionary value schema.

    Raises:
        NotATypeSchemaError: If the value schema carries no type.
        UnsupportedFeatureError: For a default on the node, an enum on the value
            schema, and unsupported value types.
    """
    value_schema = node.dictionary_value_type
    if value_schema is None or not value_schema.type:
        raise NotATypeSchemaError(f"Dictionary value schema of '{name}' does not represent a type")

    if value_schema.enum is not None:
        raise UnsupportedFeatureError("dictionary", f"'{name}': enum on dictionary values is not supported")

    if len(value_schema.type) > 1:
        return TypeDescriptor(type=MapTypeRef(value_type=primitive(ScalarKind.OPAQUE)))

    if node.has_default:
        raise UnsupportedFeatureError("dictionary", f"'{name}': defaults for dictionaries are not supported")

    tag = value_schema.type[0]
    if tag.name == "object" and not tag.is_reference:
        if value_schema.title is not None:
            object_type = ObjectTypeRef(name=context.object_name(value_schema.title))
            return TypeDescriptor(type=MapTypeRef(value_type=object_type))
        return TypeDescriptor(type=MapTypeRef(value_type=primitive(ScalarKind.OPAQUE)))

    if tag.name == "string" and not tag.is_reference:
        return TypeDescriptor(type=MapTypeRef(value_type=primitive(ScalarKind.STRING)))

    raise UnsupportedFeatureError(
        f"Dictionary<string,{tag.name}>", f"'{name}': Dictionary<string,{tag.name}> is not supported"
    )
