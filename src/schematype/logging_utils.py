# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Logging setup for the command-line interface."""

from __future__ import annotations

import logging
import sys


def configure_logging(*, verbose: bool = False) -> None:
    """Configure root logging to write diagnostics to stderr.

    Standard output is reserved for command results, so every record goes to
    stderr. Without *verbose* only warnings and errors are shown.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s - %(levelname)s - %(message)s"))
    root.addHandler(handler)
