# SPDX-License-Identifier: Apache-2.0
"""Application service that deletes objects once every listener has accepted.

The registry only decides. This service performs the removal through the
repository and publishes the outcome on the event bus.
"""

from __future__ import annotations

import logging

from deletionguard.domain.deletion import DeletionDecision
from deletionguard.domain.entities import IdentifiableObject
from deletionguard.domain.events import (
    DeletionVetoed,
    IEventBus,
    ObjectDeleted,
    ObjectDeletionRequested,
)
from deletionguard.domain.exceptions import DeleteNotAllowedError, ObjectNotFoundError
from deletionguard.domain.repositories import IObjectRepository
from deletionguard.domain.value_objects import DeletableType, Uid
from deletionguard.infrastructure.deletion_registry import DeletionRegistry

logger = logging.getLogger(__name__)


class DeletionService:
    """Checks deletion requests against the registry and removes allowed objects."""

    def __init__(
        self,
        registry: DeletionRegistry,
        repository: IObjectRepository,
        event_bus: IEventBus,
    ):
        self._registry = registry
        self._repository = repository
        self._event_bus = event_bus

    def can_delete(self, obj: IdentifiableObject) -> DeletionDecision:
        """Evaluate a deletion without performing it or raising on veto."""
        return self._registry.evaluate(ObjectDeletionRequested(obj))

    def delete(self, obj: IdentifiableObject) -> DeletionDecision:
        """Delete ``obj`` if no listener vetoes it.

        The listeners and the removal run inside one repository transaction,
        so nothing can start referencing ``obj`` between the check and the
        delete.

        Raises:
            DeleteNotAllowedError: If a listener vetoed; nothing is removed
            ObjectNotFoundError: If the repository no longer holds the object
        """
        with self._repository.transaction():
            try:
                decision = self._registry.dispatch(ObjectDeletionRequested(obj))
            except DeleteNotAllowedError as e:
                self._event_bus.publish(
                    DeletionVetoed(
                        object_type=obj.deletable_type,
                        uid=str(obj.uid),
                        reason=str(e),
                        vetoed_by=e.vetoed_by,
                    )
                )
                raise

            if not self._repository.delete(obj):
                raise ObjectNotFoundError(obj.deletable_type, obj.uid)

        logger.info("Deleted %s %s (%s)", obj.deletable_type, obj.uid, obj.name)
        self._event_bus.publish(ObjectDeleted(object_type=obj.deletable_type, uid=str(obj.uid)))
        return decision

    def get_object(self, object_type: DeletableType, uid: Uid | str) -> IdentifiableObject:
        """Look up an object, raising if it is unknown."""
        key = uid if isinstance(uid, Uid) else Uid(uid)
        obj = self._repository.get(object_type, key)
        if obj is None:
            raise ObjectNotFoundError(object_type, key)
        return obj

    def delete_by_uid(self, object_type: DeletableType, uid: Uid | str) -> DeletionDecision:
        return self.delete(self.get_object(object_type, uid))
