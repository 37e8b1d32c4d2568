# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Validator constraint blocks attached to resolved descriptors."""

from __future__ import annotations

from schematype.model.descriptors import ArrayConstraints, NumberConstraints
from schematype.model.schema import SchemaNode

# ###############
# Public Interface
# ###############


def number_constraints(node: SchemaNode) -> NumberConstraints | None:
    """Return the numeric range block for *node*, or None if it declares no bounds.

    A missing bound is reported as 0 with its presence flag cleared.
    """
    if node.minimum is None and node.maximum is None:
        return None
    return NumberConstraints(
        minimum=node.minimum if node.minimum is not None else 0,
        maximum=node.maximum if node.maximum is not None else 0,
        has_minimum=node.minimum is not None,
        has_maximum=node.maximum is not None,
        exclusive_minimum=node.exclusive_minimum,
        exclusive_maximum=node.exclusive_maximum,
    )


def array_constraints(node: SchemaNode) -> ArrayConstraints:
    """Return the length block for an array node.

    Missing item counts are reported as -1. The item string lengths come from
    the item schema and are zero unless it declares them.
    """
    items = node.items
    return ArrayConstraints(
        min_items=node.min_items if node.min_items is not None else -1,
        max_items=node.max_items if node.max_items is not None else -1,
        item_min_length=items.min_length if items is not None else 0,
        item_max_length=items.max_length if items is not None else 0,
    )
