# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Resolution of schema nodes without a container shape.

A scalar node resolves to a boolean, integer, number, string, opaque value,
a named object, or a synthesized enumeration. String enumerations keep the
literal values as member names; integer enumerations take their member names
from the symbol registry and keep the literal values as explicit members.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from schematype.errors import InvalidDefaultError, UnsupportedFeatureError, UnsupportedShapeError
from schematype.model.descriptors import (
    EnumDeclaration,
    EnumMember,
    EnumMemberDefault,
    EnumTypeRef,
    LiteralDefault,
    NumberConstraints,
    ObjectTypeRef,
    ScalarKind,
    TypeDescriptor,
    primitive,
)
from schematype.model.schema import SchemaNode
from schematype.resolver import coercion
from schematype.resolver.constraints import number_constraints
from schematype.resolver.context import ResolutionContext

# ###############
# Public Interface
# ###############


def resolve_scalar(name: str, node: SchemaNode, context: ResolutionContext) -> TypeDescriptor:
    """Resolve a scalar schema node.

    Numeric bounds produce a constraint block whatever kind the node resolves
    to. A node with more than one type tag resolves to an opaque value without
    looking at its enum or default.

    Args:
        name: Nominal base name, used to name a synthesized enumeration.
        node: The schema node; its type list must be non-empty.
        context: Registry and naming settings.

    Raises:
        UnsupportedFeatureError: For unsupported enum/default combinations and unknown tags.
        InvalidDefaultError: If a default is not a member of the synthesized enum
            or cannot be coerced to the resolved kind.
        UnknownSymbolError: If an integer enum value has no registry entry.
        RegistryUnavailableError: If the registry is needed but cannot be built.
    """
    constraints = number_constraints(node)
    tags = node.type or []

    if len(tags) > 1:
        return TypeDescriptor(type=primitive(ScalarKind.OPAQUE), constraints=constraints)

    tag = tags[0]
    if tag.is_reference:
        raise UnsupportedFeatureError(tag.name, f"'{name}': reference type tag '{tag.name}' is not supported")

    handler = _TAG_RESOLVERS.get(tag.name)
    if handler is None:
        raise UnsupportedFeatureError(tag.name, f"'{name}': type '{tag.name}' is not supported")
    return handler(name, node, context, constraints)


# ################
# Implementation
# ################

_Handler = Callable[[str, SchemaNode, ResolutionContext, NumberConstraints | None], TypeDescriptor]


def _resolve_any(
    name: str, node: SchemaNode, context: ResolutionContext, constraints: NumberConstraints | None
) -> TypeDescriptor:
    if node.enum is not None or node.has_default:
        raise UnsupportedFeatureError("any", f"'{name}': enum or default on an 'any' schema is not supported")
    return TypeDescriptor(type=primitive(ScalarKind.OPAQUE), constraints=constraints)


def _resolve_object(
    name: str, node: SchemaNode, context: ResolutionContext, constraints: NumberConstraints | None
) -> TypeDescriptor:
    if node.enum is not None or node.has_default:
        raise UnsupportedFeatureError("object", f"'{name}': enum or default on an 'object' schema is not supported")
    if node.title is None:
        raise UnsupportedFeatureError("object", f"'{name}': anonymous inline objects are not supported")
    return TypeDescriptor(type=ObjectTypeRef(name=context.object_name(node.title)), constraints=constraints)


def _resolve_number(
    name: str, node: SchemaNode, context: ResolutionContext, constraints: NumberConstraints | None
) -> TypeDescriptor:
    if node.enum is not None:
        raise UnsupportedFeatureError("number", f"'{name}': enum on a 'number' schema is not supported")
    default = None
    if node.has_default:
        default = LiteralDefault(value=_coerce_default(name, node.default, coercion.to_float32))
    return TypeDescriptor(type=primitive(ScalarKind.NUMBER), default=default, constraints=constraints)


def _resolve_boolean(
    name: str, node: SchemaNode, context: ResolutionContext, constraints: NumberConstraints | None
) -> TypeDescriptor:
    if node.enum is not None:
        raise UnsupportedFeatureError("boolean", f"'{name}': enum on a 'boolean' schema is not supported")
    default = None
    if node.has_default:
        default = LiteralDefault(value=_coerce_default(name, node.default, coercion.to_bool))
    return TypeDescriptor(type=primitive(ScalarKind.BOOLEAN), default=default, constraints=constraints)


def _resolve_string(
    name: str, node: SchemaNode, context: ResolutionContext, constraints: NumberConstraints | None
) -> TypeDescriptor:
    if node.enum is None:
        default = None
        if node.has_default:
            default = LiteralDefault(value=_coerce_default(name, node.default, coercion.to_string))
        return TypeDescriptor(type=primitive(ScalarKind.STRING), default=default, constraints=constraints)

    enum_name = context.enum_name(name)
    members: list[EnumMember] = []
    for value in node.enum:
        if not isinstance(value, str):
            raise UnsupportedShapeError(f"'{name}': string enum value {value!r} is not a string")
        members.append(EnumMember(name=value))
    declaration = EnumDeclaration(name=enum_name, members=members)

    default = None
    if node.has_default:
        if not isinstance(node.default, str) or declaration.member(node.default) is None:
            raise InvalidDefaultError(
                f"'{name}': default value {node.default!r} is not in the enum list", default=node.default
            )
        default = EnumMemberDefault(enum_name=enum_name, member=node.default)

    return TypeDescriptor(
        type=EnumTypeRef(name=enum_name),
        default=default,
        dependent_type=declaration,
        constraints=constraints,
    )


def _resolve_integer(
    name: str, node: SchemaNode, context: ResolutionContext, constraints: NumberConstraints | None
) -> TypeDescriptor:
    if node.enum is None:
        default = None
        if node.has_default:
            default = LiteralDefault(value=_coerce_default(name, node.default, coercion.to_int32))
        return TypeDescriptor(type=primitive(ScalarKind.INTEGER), default=default, constraints=constraints)

    default_value = _coerce_default(name, node.default, coercion.to_int64) if node.has_default else None

    enum_name = context.enum_name(name)
    registry = context.symbols()
    members: list[EnumMember] = []
    default_member: str | None = None
    for literal in node.enum:
        try:
            value = coercion.to_int64(literal)
        except ValueError as exc:
            raise UnsupportedShapeError(f"'{name}': integer enum value {literal!r} is not an integer") from exc
        member_name = registry.lookup(value)
        members.append(EnumMember(name=member_name, value=coercion.to_int32(value)))
        if default_value is not None and default_value == value:
            default_member = member_name

    default = None
    if node.has_default:
        if default_member is None:
            raise InvalidDefaultError(
                f"'{name}': default value {node.default!r} is not in the enum list", default=node.default
            )
        default = EnumMemberDefault(enum_name=enum_name, member=default_member)

    return TypeDescriptor(
        type=EnumTypeRef(name=enum_name),
        default=default,
        dependent_type=EnumDeclaration(name=enum_name, members=members),
        constraints=constraints,
    )


def _coerce_default(name: str, value: Any, coerce: Callable[[Any], Any]) -> Any:
    """Apply *coerce* to a default value, reporting failures as InvalidDefaultError."""
    try:
        return coerce(value)
    except ValueError as exc:
        raise InvalidDefaultError(f"'{name}': invalid default value: {exc}", default=value) from exc


_TAG_RESOLVERS: dict[str, _Handler] = {
    "any": _resolve_any,
    "object": _resolve_object,
    "number": _resolve_number,
    "string": _resolve_string,
    "integer": _resolve_integer,
    "boolean": _resolve_boolean,
}
