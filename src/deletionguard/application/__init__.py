# SPDX-License-Identifier: Apache-2.0
"""Application services for deletionguard."""

from __future__ import annotations

from .services import DeletionService

__all__ = ["DeletionService"]
