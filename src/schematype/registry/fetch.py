# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Retrieval of the enumeration-constant document backing the symbol registry."""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import unquote, urlparse

import requests

from schematype.config import DEFAULT_FETCH_TIMEOUT
from schematype.errors import RegistryUnavailableError

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def fetch_registry_document(source: str, *, timeout: float = DEFAULT_FETCH_TIMEOUT) -> str:
    """Return the text of the registry document found at *source*.

    ``http://`` and ``https://`` sources are fetched with a single GET request.
    ``file://`` URLs and plain paths are read from disk.

    Args:
        source: URL or filesystem path of the document.
        timeout: Timeout in seconds for the HTTP request.

    Raises:
        RegistryUnavailableError: If the document cannot be retrieved.
    """
    parsed = urlparse(source)
    if parsed.scheme in ("http", "https"):
        return _fetch_url(source, timeout)
    path = Path(unquote(parsed.path)) if parsed.scheme == "file" else Path(source)
    return _read_file(path)


# ################
# Implementation
# ################


def _fetch_url(url: str, timeout: float) -> str:
    logger.info("Fetching symbol registry from %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise RegistryUnavailableError(f"Cannot fetch symbol registry from '{url}': {exc}") from exc
    return response.text


def _read_file(path: Path) -> str:
    logger.info("Reading symbol registry from %s", path)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RegistryUnavailableError(f"Cannot read symbol registry '{path}': {exc}") from exc
