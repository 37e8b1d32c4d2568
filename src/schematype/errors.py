# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Errors raised while resolving a schema node into a type descriptor.

Every error is terminal to the single resolution call that raised it. Callers
are expected to report the nominal name of the schema node that failed.
"""

from __future__ import annotations

from typing import Any

# ###############
# Public Interface
# ###############


class ResolutionError(Exception):
    """Base class for all errors raised by the resolution engine."""


class UnsupportedShapeError(ResolutionError):
    """Raised when a schema node has a shape the engine cannot resolve.

    This includes unresolved ``$ref`` indirections reaching the engine.
    """


class NotATypeSchemaError(ResolutionError):
    """Raised when a schema node carries no type information at all."""


class MissingItemTypeError(ResolutionError):
    """Raised when an array-shaped schema node lacks an item type."""


class UnsupportedFeatureError(ResolutionError):
    """Raised for a recognized but unsupported combination.

    Attributes:
        feature: The offending primitive or shape name, for diagnostics.
    """

    def __init__(self, feature: str, message: str | None = None) -> None:
        super().__init__(message or f"Not implemented: {feature}")
        self.feature = feature


class InvalidDefaultError(ResolutionError):
    """Raised when a default value does not fit the resolved type.

    Attributes:
        default: The offending default value as declared in the schema.
    """

    def __init__(self, message: str, default: Any = None) -> None:
        super().__init__(message)
        self.default = default


class RegistryUnavailableError(ResolutionError):
    """Raised when the external symbol document cannot be fetched or parsed."""


class UnknownSymbolError(ResolutionError):
    """Raised when a numeric constant has no entry in the symbol registry.

    Attributes:
        value: The numeric constant that was looked up.
    """

    def __init__(self, value: int) -> None:
        super().__init__(f"No symbol registered for value {value} (0x{value & 0xFFFFFFFFFFFFFFFF:X})")
        self.value = value
