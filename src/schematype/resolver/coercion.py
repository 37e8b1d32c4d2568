# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Coercion of schema literals into the engine's scalar representations.

Integers are narrowed to signed 32 bits and floating-point values are rounded
to single precision. Each helper raises ``ValueError`` when the literal cannot
represent the requested kind; resolvers translate that into their own errors.
"""

from __future__ import annotations

import math
import struct
from typing import Any

_INT32_RANGE = 1 << 32
_INT32_MAX = (1 << 31) - 1


def to_int64(value: Any) -> int:
    """Return *value* as an exact integer without narrowing."""
    if isinstance(value, bool):
        raise ValueError(f"{value!r} is not an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ValueError(f"{value!r} is not an integer")


def to_int32(value: Any) -> int:
    """Return *value* narrowed to a signed 32-bit integer (two's-complement wrap)."""
    wrapped = to_int64(value) % _INT32_RANGE
    if wrapped > _INT32_MAX:
        wrapped -= _INT32_RANGE
    return wrapped


def to_float32(value: Any) -> float:
    """Return *value* rounded to the nearest single-precision float."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{value!r} is not a number")
    try:
        return struct.unpack("f", struct.pack("f", float(value)))[0]
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    raise ValueError(f"{value!r} is not a boolean")


def to_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise ValueError(f"{value!r} is not a string")
