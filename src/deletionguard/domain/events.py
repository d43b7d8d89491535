# SPDX-License-Identifier: Apache-2.0
"""Domain events for deletionguard.

``ObjectDeletionRequested`` is the input to the deletion registry. The other
events describe what happened to a request and are published on the event
bus so monitoring can react without the domain knowing about it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Optional, Protocol
from uuid import UUID, uuid4

from .entities import IdentifiableObject
from .value_objects import DeletableType


class IEventBus(Protocol):
    """Protocol for event bus implementations."""

    def subscribe(self, etype: type[DomainEvent], fn: Callable[[DomainEvent], None]) -> None:
        """Subscribe a function to handle events of a specific type.

        Args:
            etype: The type of domain event to subscribe to
            fn: Function that will handle events of this type
        """
        ...

    def publish(self, event: DomainEvent) -> None:
        """Publish an event to all subscribers.

        Args:
            event: The domain event to publish
        """
        ...


class DomainEvent(ABC):
    """Base class for all domain events."""

    @property
    @abstractmethod
    def event_type(self) -> str:
        """Unique identifier for the event type."""
        pass

    @property
    @abstractmethod
    def aggregate_id(self) -> str:
        """Identifier of the object the event is about."""
        pass

    @abstractmethod
    def _get_event_data(self) -> dict[str, Any]:
        pass

    def to_dict(self) -> dict[str, Any]:
        """Serialize the event envelope and its data."""
        return {
            "event_id": str(self.event_id),
            "event_type": self.event_type,
            "aggregate_id": self.aggregate_id,
            "occurred_at": self.occurred_at.isoformat(),
            "version": self.version,
            "data": self._get_event_data(),
        }

    def __str__(self) -> str:
        return f"{self.event_type}(id={self.event_id}, aggregate={self.aggregate_id})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(event_id={self.event_id}, "
            f"occurred_at={self.occurred_at.isoformat()}, "
            f"aggregate_id={self.aggregate_id})"
        )


@dataclass(frozen=True)
class ObjectDeletionRequested(DomainEvent):
    """Raised before an object is deleted; dispatched to deletion listeners."""

    source: IdentifiableObject
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @property
    def object_type(self) -> DeletableType:
        """Type tag of the object being deleted.

        Raises:
            TypeError: If the object carries no deletable type tag
        """
        tag = getattr(self.source, "deletable_type", None)
        if not isinstance(tag, DeletableType):
            raise TypeError(
                f"{self.source!r} has no deletable type and cannot be dispatched for deletion"
            )
        return tag

    @property
    def event_type(self) -> str:
        return "object_deletion_requested"

    @property
    def aggregate_id(self) -> str:
        return str(self.source.uid)

    def _get_event_data(self) -> dict[str, Any]:
        return {
            "object_type": self.object_type.value,
            "uid": str(self.source.uid),
            "name": self.source.name,
        }


@dataclass(frozen=True)
class DeletionVetoed(DomainEvent):
    """Raised when a listener refused a deletion."""

    object_type: DeletableType
    uid: str
    reason: str
    vetoed_by: Optional[str] = None
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @property
    def event_type(self) -> str:
        return "deletion_vetoed"

    @property
    def aggregate_id(self) -> str:
        return self.uid

    def _get_event_data(self) -> dict[str, Any]:
        return {
            "object_type": self.object_type.value,
            "uid": self.uid,
            "reason": self.reason,
            "vetoed_by": self.vetoed_by,
        }


@dataclass(frozen=True)
class ObjectDeleted(DomainEvent):
    """Raised after an object passed every listener and was removed."""

    object_type: DeletableType
    uid: str
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @property
    def event_type(self) -> str:
        return "object_deleted"

    @property
    def aggregate_id(self) -> str:
        return self.uid

    def _get_event_data(self) -> dict[str, Any]:
        return {"object_type": self.object_type.value, "uid": self.uid}
