# SPDX-License-Identifier: Apache-2.0
"""Base class for deletion handlers.

A deletion handler groups the veto functions of one area of the domain. It is
attached to a registry with ``set_manager`` and registers its functions when
``init`` is called during bootstrap.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from deletionguard.domain.deletion import DeletionListener, VetoFunction
from deletionguard.domain.value_objects import DeletableType
from deletionguard.infrastructure.deletion_registry import DeletionRegistry

logger = logging.getLogger(__name__)


class DeletionHandler(ABC):
    """Registers veto functions for one or more deletable types."""

    def __init__(self) -> None:
        self._manager: Optional[DeletionRegistry] = None
        self._listeners: List[DeletionListener] = []

    def set_manager(self, manager: DeletionRegistry) -> None:
        self._manager = manager

    def init(self) -> None:
        """Register this handler's veto functions with its manager.

        Raises:
            RuntimeError: If no manager has been set
        """
        self._require_manager()
        self.register()
        logger.debug(
            "Initialized %s with %d listener(s)", self.__class__.__name__, len(self._listeners)
        )

    @abstractmethod
    def register(self) -> None:
        """Call ``when_vetoing`` for every type this handler guards."""
        ...

    def when_vetoing(self, object_type: DeletableType, fn: VetoFunction) -> None:
        manager = self._require_manager()
        name = f"{self.__class__.__name__}.{getattr(fn, '__name__', 'veto')}"
        self._listeners.append(manager.when_vetoing(object_type, fn, name=name))

    def _require_manager(self) -> DeletionRegistry:
        if self._manager is None:
            raise RuntimeError(f"{self.__class__.__name__} has no deletion manager set")
        return self._manager

    @property
    def listeners(self) -> List[DeletionListener]:
        """Listeners registered by this handler so far."""
        return list(self._listeners)
