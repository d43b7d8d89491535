# SPDX-License-Identifier: Apache-2.0
"""Domain entities for deletionguard.

Entities are metadata objects with identity. Each concrete class carries a
class-level ``deletable_type`` tag which the deletion registry uses to find
the listeners that guard its deletion.
"""

from __future__ import annotations

from typing import ClassVar

from .value_objects import DeletableType, Uid


class IdentifiableObject:
    """Base class for all deletable metadata objects.

    Objects are distinguished by their uid rather than their attributes.
    """

    deletable_type: ClassVar[DeletableType]

    def __init__(self, uid: Uid, name: str):
        if not name or not name.strip():
            raise ValueError("Name cannot be empty")
        self._uid = uid
        self._name = name.strip()

    @property
    def uid(self) -> Uid:
        return self._uid

    @property
    def name(self) -> str:
        return self._name

    def __eq__(self, other: object) -> bool:
        """Objects are equal if they have the same type tag and uid."""
        return (
            isinstance(other, IdentifiableObject)
            and self.deletable_type is other.deletable_type
            and self._uid == other._uid
        )

    def __hash__(self) -> int:
        return hash((self.deletable_type, self._uid))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(uid={self._uid}, name={self._name!r})"


class RelationshipType(IdentifiableObject):
    """Describes how two tracked objects can be related, e.g. mother/child."""

    deletable_type = DeletableType.RELATIONSHIP_TYPE

    def __init__(self, uid: Uid, name: str, bidirectional: bool = False):
        super().__init__(uid, name)
        self._bidirectional = bidirectional

    @property
    def bidirectional(self) -> bool:
        return self._bidirectional


class Relationship(IdentifiableObject):
    """A concrete link between two objects, typed by a relationship type."""

    deletable_type = DeletableType.RELATIONSHIP

    def __init__(self, uid: Uid, name: str, relationship_type: Uid):
        super().__init__(uid, name)
        self._relationship_type = relationship_type

    @property
    def relationship_type(self) -> Uid:
        """Uid of the relationship type this relationship belongs to."""
        return self._relationship_type


class IndicatorType(IdentifiableObject):
    """Multiplication factor applied to indicator values (e.g. percent = 100)."""

    deletable_type = DeletableType.INDICATOR_TYPE

    def __init__(self, uid: Uid, name: str, factor: int = 1, number: bool = False):
        super().__init__(uid, name)
        if factor <= 0:
            raise ValueError(f"Indicator type factor must be positive: {factor}")
        self._factor = factor
        self._number = number

    @property
    def factor(self) -> int:
        return self._factor

    @property
    def number(self) -> bool:
        """True when the type represents a plain number without a denominator."""
        return self._number


class Indicator(IdentifiableObject):
    deletable_type = DeletableType.INDICATOR

    def __init__(self, uid: Uid, name: str, indicator_type: Uid):
        super().__init__(uid, name)
        self._indicator_type = indicator_type

    @property
    def indicator_type(self) -> Uid:
        return self._indicator_type
