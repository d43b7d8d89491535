# SPDX-License-Identifier: Apache-2.0
"""Repository interfaces for the deletionguard domain.

Deletion listeners only need read access to whatever references the object
being deleted. The deletion service additionally needs to look objects up and
remove them once every listener has accepted.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ContextManager, List, Optional

from .entities import IdentifiableObject, Indicator, IndicatorType, Relationship, RelationshipType
from .value_objects import DeletableType, Uid


class IObjectRepository(ABC):
    """Generic lookup and removal of deletable objects."""

    @abstractmethod
    def get(self, object_type: DeletableType, uid: Uid) -> Optional[IdentifiableObject]:
        """Load an object by type and uid.

        Returns:
            The object if found, None otherwise
        """
        ...

    @abstractmethod
    def delete(self, obj: IdentifiableObject) -> bool:
        """Remove an object.

        Returns:
            True if the object existed and was removed
        """
        ...

    @abstractmethod
    def count(self, object_type: DeletableType) -> int:
        ...

    @abstractmethod
    def transaction(self) -> ContextManager[None]:
        """Exclusive access to the repository for the duration of the block.

        Reads made by deletion listeners inside the block must see the same
        state the subsequent ``delete`` acts on. Implementations must allow
        those reads to re-enter from the owning thread.
        """
        ...


class IRelationshipRepository(ABC):
    """Read access to relationships, used to guard relationship type deletion."""

    @abstractmethod
    def get_relationships_by_relationship_type(
        self, relationship_type: RelationshipType
    ) -> List[Relationship]:
        """Find all relationships of the given type.

        Args:
            relationship_type: The relationship type being deleted

        Returns:
            Relationships of that type, empty if none
        """
        ...


class IIndicatorRepository(ABC):
    @abstractmethod
    def get_indicators_by_indicator_type(self, indicator_type: IndicatorType) -> List[Indicator]:
        """Find all indicators that use the given indicator type."""
        ...
