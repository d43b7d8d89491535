# SPDX-License-Identifier: Apache-2.0
"""Shared test fixtures for the deletionguard test suite.

FIXTURES PROVIDED:
- reset_global_state (autouse): drops the bootstrapped registry, catalog and bus
- registry: fresh, unfrozen DeletionRegistry
- catalog: sample in-memory catalog (see tests.fakes.catalog)
- event_bus: FakeEventBus capturing published events
- catalog_file / config_file: YAML files written to a temporary directory
"""

from __future__ import annotations

from pathlib import Path

import pytest

from deletionguard.bootstrap import reset_bootstrap_state
from deletionguard.infrastructure.deletion_registry import DeletionRegistry
from tests.fakes import SAMPLE_CATALOG_YAML, FakeEventBus, build_sample_catalog


@pytest.fixture(autouse=True)
def reset_global_state(monkeypatch):
    """Every test starts without a bootstrapped registry or config override."""
    monkeypatch.delenv("DELETIONGUARD_CONFIG", raising=False)
    reset_bootstrap_state()
    yield
    reset_bootstrap_state()


@pytest.fixture
def registry() -> DeletionRegistry:
    return DeletionRegistry()


@pytest.fixture
def catalog():
    return build_sample_catalog()


@pytest.fixture
def event_bus() -> FakeEventBus:
    return FakeEventBus()


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    path = tmp_path / "catalog.yaml"
    path.write_text(SAMPLE_CATALOG_YAML)
    return path


@pytest.fixture
def config_file(tmp_path: Path):
    """Factory writing a settings YAML file and returning its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "deletionguard.yaml"
        path.write_text(content)
        return path

    return _write
