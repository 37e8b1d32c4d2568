# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for schematype."""
