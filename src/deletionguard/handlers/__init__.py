# SPDX-License-Identifier: Apache-2.0
"""Deletion handlers guarding each area of the metadata model."""

from __future__ import annotations

from typing import List

from deletionguard.infrastructure.repositories.in_memory import InMemoryCatalog

from .base import DeletionHandler
from .indicator import IndicatorDeletionHandler
from .relationship import RelationshipDeletionHandler


def create_default_handlers(catalog: InMemoryCatalog) -> List[DeletionHandler]:
    """Build every built-in handler against ``catalog``, in registration order."""
    return [
        RelationshipDeletionHandler(catalog),
        IndicatorDeletionHandler(catalog),
    ]


__all__ = [
    "DeletionHandler",
    "RelationshipDeletionHandler",
    "IndicatorDeletionHandler",
    "create_default_handlers",
]
