# SPDX-License-Identifier: Apache-2.0
"""Infrastructure layer: registry, event bus, repositories and monitoring."""

from __future__ import annotations

from .deletion_registry import DeletionRegistry

__all__ = ["DeletionRegistry"]
