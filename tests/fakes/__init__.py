# SPDX-License-Identifier: Apache-2.0
"""Fake implementations and sample data for tests."""

from __future__ import annotations

from .catalog import SAMPLE_CATALOG_YAML, build_sample_catalog
from .events import FakeEventBus

__all__ = ["FakeEventBus", "build_sample_catalog", "SAMPLE_CATALOG_YAML"]
