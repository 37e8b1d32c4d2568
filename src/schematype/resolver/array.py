# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Resolution of array-shaped schema nodes into arrays of scalars."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from schematype.errors import InvalidDefaultError, MissingItemTypeError, UnsupportedFeatureError
from schematype.model.descriptors import ArrayDefault, ArrayTypeRef, ScalarKind, TypeDescriptor, primitive
from schematype.model.schema import SchemaNode
from schematype.resolver import coercion
from schematype.resolver.constraints import array_constraints
from schematype.resolver.context import ResolutionContext

# ###############
# Public Interface
# ###############


def resolve_array(name: str, node: SchemaNode, context: ResolutionContext) -> TypeDescriptor:
    """Resolve an ``array`` schema node from its item schema.

    An :class:`~schematype.model.descriptors.ArrayConstraints` block is always
    attached. Items with several type tags resolve to an array of opaque
    values. A default list is coerced element by element.

    Raises:
        MissingItemTypeError: If the node has no item schema or the item schema has no type.
        UnsupportedFeatureError: For an enum on the array or its items, a default
            on an array of objects, and unsupported item types.
        InvalidDefaultError: If the default is not a list of values of the item kind.
    """
    items = node.items
    if items is None or not items.type:
        raise MissingItemTypeError(f"Array type '{name}' must contain an item type")

    if node.enum is not None:
        raise UnsupportedFeatureError("array", f"'{name}': enum on an 'array' schema is not supported")
    if items.enum is not None:
        raise UnsupportedFeatureError("array", f"'{name}': enum on array items is not supported")

    constraints = array_constraints(node)

    if len(items.type) > 1:
        return TypeDescriptor(type=ArrayTypeRef(element_type=primitive(ScalarKind.OPAQUE)), constraints=constraints)

    tag = items.type[0]
    if tag.is_reference:
        raise UnsupportedFeatureError(tag.name, f"'{name}': array of reference '{tag.name}' is not supported")

    if tag.name == "object":
        if node.has_default:
            raise UnsupportedFeatureError("object", f"'{name}': array of objects has a default value")
        return TypeDescriptor(type=ArrayTypeRef(element_type=primitive(ScalarKind.OPAQUE)), constraints=constraints)

    element = _ELEMENT_KINDS.get(tag.name)
    if element is None:
        raise UnsupportedFeatureError(tag.name, f"'{name}': array of {tag.name} is not supported")
    kind, coerce = element

    default = None
    if node.has_default:
        default = ArrayDefault(element_kind=kind, values=_coerce_elements(name, node.default, coerce))

    return TypeDescriptor(
        type=ArrayTypeRef(element_type=primitive(kind)),
        default=default,
        constraints=constraints,
    )


# ################
# Implementation
# ################

_ELEMENT_KINDS: dict[str, tuple[ScalarKind, Callable[[Any], Any]]] = {
    "boolean": (ScalarKind.BOOLEAN, coercion.to_bool),
    "string": (ScalarKind.STRING, coercion.to_string),
    "integer": (ScalarKind.INTEGER, coercion.to_int32),
    "number": (ScalarKind.NUMBER, coercion.to_float32),
}


def _coerce_elements(name: str, default: Any, coerce: Callable[[Any], Any]) -> list[Any]:
    """Coerce every element of an array default, keeping their order."""
    if not isinstance(default, list):
        raise InvalidDefaultError(f"'{name}': default value {default!r} of an array is not a list", default=default)
    try:
        return [coerce(value) for value in default]
    except ValueError as exc:
        raise InvalidDefaultError(f"'{name}': invalid array default element: {exc}", default=default) from exc
