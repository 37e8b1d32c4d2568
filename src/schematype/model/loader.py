# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Loading schema nodes from parsed or on-disk JSON documents."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from schematype.model.schema import SchemaNode

# ###############
# Public Interface
# ###############


class SchemaLoadError(Exception):
    """Raised when a schema document cannot be read or does not describe a schema node."""


def parse_schema_node(data: object, source_label: str = "<data>") -> SchemaNode:
    """Build a SchemaNode from an already parsed JSON value.

    Args:
        data: The parsed JSON object.
        source_label: Human-readable label used in error messages.

    Raises:
        SchemaLoadError: If *data* is not an object or has fields of the wrong type.
    """
    if not isinstance(data, dict):
        raise SchemaLoadError(f"{source_label}: schema must be a JSON object")
    try:
        return SchemaNode.model_validate(data)
    except ValidationError as exc:
        raise SchemaLoadError(f"Invalid schema in {source_label}: {exc}") from exc


def load_schema_node(path: Path) -> SchemaNode:
    """Read a JSON schema file and build its SchemaNode.

    Raises:
        SchemaLoadError: If the file cannot be read, is not valid JSON, or is not a schema node.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaLoadError(f"Cannot read schema file '{path}': {exc}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaLoadError(f"Invalid JSON in '{path}': {exc}") from exc

    return parse_schema_node(data, source_label=str(path))
