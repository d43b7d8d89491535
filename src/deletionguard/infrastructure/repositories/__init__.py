# SPDX-License-Identifier: Apache-2.0
"""Repository implementations."""

from __future__ import annotations

from .catalog_loader import CatalogFile, load_catalog
from .in_memory import InMemoryCatalog

__all__ = ["InMemoryCatalog", "CatalogFile", "load_catalog"]
