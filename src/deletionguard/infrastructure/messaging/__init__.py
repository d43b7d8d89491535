# SPDX-License-Identifier: Apache-2.0
"""Infrastructure for the domain event bus."""

from __future__ import annotations

from .in_memory_bus import InMemoryEventBus

__all__ = ["InMemoryEventBus"]
