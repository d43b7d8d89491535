# SPDX-License-Identifier: Apache-2.0
"""In-memory repository implementation.

A single catalog object implements every repository interface. It backs the
CLI and the test suite.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterable, Iterator, List, Optional

from deletionguard.domain.entities import (
    IdentifiableObject,
    Indicator,
    IndicatorType,
    Relationship,
    RelationshipType,
)
from deletionguard.domain.repositories import (
    IIndicatorRepository,
    IObjectRepository,
    IRelationshipRepository,
)
from deletionguard.domain.value_objects import DeletableType, Uid

logger = logging.getLogger(__name__)


class InMemoryCatalog(IObjectRepository, IRelationshipRepository, IIndicatorRepository):
    """Thread-safe in-memory store of metadata objects keyed by type and uid."""

    def __init__(self, objects: Optional[Iterable[IdentifiableObject]] = None):
        self._objects: Dict[DeletableType, Dict[Uid, IdentifiableObject]] = {
            t: {} for t in DeletableType
        }
        self._lock = threading.RLock()
        for obj in objects or ():
            self.add(obj)

    def add(self, obj: IdentifiableObject) -> None:
        """Add or replace an object.

        Raises:
            ValueError: If the object's uid is already used by another type, or
                it references a relationship type or indicator type that is not
                in the catalog
        """
        with self._lock:
            for object_type, objects in self._objects.items():
                if object_type is not obj.deletable_type and obj.uid in objects:
                    raise ValueError(
                        f"Uid {obj.uid} is already used by a {object_type.display_name}"
                    )
            self._check_reference(obj)
            self._objects[obj.deletable_type][obj.uid] = obj

    def _check_reference(self, obj: IdentifiableObject) -> None:
        if isinstance(obj, Relationship):
            target_type, target = DeletableType.RELATIONSHIP_TYPE, obj.relationship_type
        elif isinstance(obj, Indicator):
            target_type, target = DeletableType.INDICATOR_TYPE, obj.indicator_type
        else:
            return
        if target not in self._objects[target_type]:
            raise ValueError(
                f"{obj.deletable_type.display_name} {obj.uid} references unknown "
                f"{target_type.display_name} {target}"
            )

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Hold the catalog lock; reads and deletes from this thread re-enter it."""
        with self._lock:
            yield

    def get(self, object_type: DeletableType, uid: Uid) -> Optional[IdentifiableObject]:
        with self._lock:
            return self._objects[DeletableType(object_type)].get(uid)

    def delete(self, obj: IdentifiableObject) -> bool:
        with self._lock:
            removed = self._objects[obj.deletable_type].pop(obj.uid, None)
        if removed is None:
            logger.debug("Nothing to delete for %s %s", obj.deletable_type, obj.uid)
            return False
        return True

    def count(self, object_type: DeletableType) -> int:
        with self._lock:
            return len(self._objects[DeletableType(object_type)])

    def list_objects(self, object_type: DeletableType) -> List[IdentifiableObject]:
        """All objects of ``object_type`` in insertion order."""
        with self._lock:
            return list(self._objects[DeletableType(object_type)].values())

    def get_relationships_by_relationship_type(
        self, relationship_type: RelationshipType
    ) -> List[Relationship]:
        with self._lock:
            return [
                r
                for r in self._objects[DeletableType.RELATIONSHIP].values()
                if isinstance(r, Relationship) and r.relationship_type == relationship_type.uid
            ]

    def get_indicators_by_indicator_type(self, indicator_type: IndicatorType) -> List[Indicator]:
        with self._lock:
            return [
                i
                for i in self._objects[DeletableType.INDICATOR].values()
                if isinstance(i, Indicator) and i.indicator_type == indicator_type.uid
            ]

    def clear(self) -> None:
        with self._lock:
            for objects in self._objects.values():
                objects.clear()
