# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization and deserialization of resolved type descriptors.

Descriptors are stored as compact JSON so that a separate emitter process can
consume them. The format is versioned so future schema changes can be detected.
"""

from __future__ import annotations

import json
from pathlib import Path

from schematype.model.descriptors import TypeDescriptor

# ###############
# Public Interface
# ###############

ARTIFACT_FORMAT_VERSION = "1"


def serialize(descriptor: TypeDescriptor) -> str:
    """Serialize a TypeDescriptor to a compact JSON string."""
    payload = {
        "v": ARTIFACT_FORMAT_VERSION,
        "descriptor": descriptor.model_dump(mode="json", exclude_none=True),
    }
    return json.dumps(payload, separators=(",", ":"))


def deserialize(data: str) -> TypeDescriptor:
    """Deserialize a TypeDescriptor from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Raises:
        ValueError: If the artifact format version is not recognised.
    """
    obj = json.loads(data)
    version = obj.get("v")
    if version != ARTIFACT_FORMAT_VERSION:
        raise ValueError(f"Unsupported artifact format version: {version!r}")
    return TypeDescriptor.model_validate(obj["descriptor"])


def write_artifact(descriptor: TypeDescriptor, path: Path) -> None:
    """Write a descriptor artifact to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(descriptor), encoding="utf-8")


def read_artifact(path: Path) -> TypeDescriptor:
    """Read and deserialize a descriptor artifact from *path*."""
    return deserialize(path.read_text(encoding="utf-8"))
