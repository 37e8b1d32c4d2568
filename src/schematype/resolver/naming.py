# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Derivation of type names from schema titles and nominal names."""

from __future__ import annotations

import re

from schematype.config import DEFAULT_ENUM_SUFFIX
from schematype.errors import UnsupportedShapeError

# ###############
# Public Interface
# ###############

_WORD_RE = re.compile(r"[A-Za-z0-9]+")


def type_name_from_title(title: str) -> str:
    """Turn a human-readable title into a type name.

    Words are split on any non-alphanumeric character and joined with their
    first letter upper-cased, e.g. ``"Accessor Sparse"`` -> ``"AccessorSparse"``.
    A name that would start with a digit is prefixed with an underscore.

    Raises:
        UnsupportedShapeError: If the title contains no alphanumeric character.
    """
    words = _WORD_RE.findall(title)
    if not words:
        raise UnsupportedShapeError(f"Title {title!r} does not yield a type name")
    name = "".join(word[:1].upper() + word[1:] for word in words)
    if name[0].isdigit():
        name = "_" + name
    return name


def enum_type_name(name: str, suffix: str = DEFAULT_ENUM_SUFFIX) -> str:
    """Return the name of the enumeration synthesized for nominal name *name*."""
    return f"{name}{suffix}"
