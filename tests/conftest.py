# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures for the schematype test suite."""

from collections.abc import Iterator

import pytest

from schematype.registry.symbols import SymbolRegistry, reset_default_registry


@pytest.fixture(autouse=True)
def _isolated_default_registry() -> Iterator[None]:
    """Ensure no test observes a default registry built by another test."""
    reset_default_registry()
    yield
    reset_default_registry()


@pytest.fixture
def registry() -> SymbolRegistry:
    """A small pre-built registry of texture filter constants."""
    return SymbolRegistry(
        {
            0: "NONE",
            1: "ONE",
            9728: "NEAREST",
            9729: "LINEAR",
            33071: "CLAMP_TO_EDGE",
            5126: "FLOAT",
        }
    )
