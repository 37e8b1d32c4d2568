# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema node input model and type descriptor output model."""

from schematype.model.descriptors import (
    ArrayConstraints,
    ArrayDefault,
    ArrayTypeRef,
    Constraints,
    DefaultValue,
    EnumDeclaration,
    EnumMember,
    EnumMemberDefault,
    EnumTypeRef,
    LiteralDefault,
    MapTypeRef,
    NumberConstraints,
    ObjectTypeRef,
    PrimitiveTypeRef,
    ScalarKind,
    TypeDescriptor,
    TypeRef,
)
from schematype.model.loader import SchemaLoadError, load_schema_node, parse_schema_node
from schematype.model.schema import SchemaNode, TypeTag

__all__ = [
    # Input
    "TypeTag",
    "SchemaNode",
    "SchemaLoadError",
    "parse_schema_node",
    "load_schema_node",
    # Type identities
    "ScalarKind",
    "PrimitiveTypeRef",
    "EnumTypeRef",
    "ObjectTypeRef",
    "ArrayTypeRef",
    "MapTypeRef",
    "TypeRef",
    # Defaults and declarations
    "LiteralDefault",
    "EnumMemberDefault",
    "ArrayDefault",
    "DefaultValue",
    "EnumMember",
    "EnumDeclaration",
    # Constraints
    "NumberConstraints",
    "ArrayConstraints",
    "Constraints",
    "TypeDescriptor",
]
