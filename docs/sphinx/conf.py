# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the schematype API documentation."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

project = "schematype"
author = "Schematype Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]
autodoc_member_order = "bysource"

html_theme = "alabaster"
