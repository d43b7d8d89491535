# SPDX-License-Identifier: Apache-2.0
"""Domain layer for deletionguard.

Contains the deletable metadata objects, the closed type enumeration, the
listener and veto types, domain events and repository interfaces. Nothing in
here depends on infrastructure.
"""

from __future__ import annotations

from .deletion import (
    DeletionDecision,
    DeletionListener,
    DeletionOutcome,
    DeletionVeto,
    VetoFunction,
)
from .entities import IdentifiableObject, Indicator, IndicatorType, Relationship, RelationshipType
from .events import (
    DeletionVetoed,
    DomainEvent,
    IEventBus,
    ObjectDeleted,
    ObjectDeletionRequested,
)
from .exceptions import (
    DeleteNotAllowedError,
    DeletionError,
    DuplicateListenerError,
    ObjectNotFoundError,
    RegistryFrozenError,
)
from .repositories import IIndicatorRepository, IObjectRepository, IRelationshipRepository
from .value_objects import DeletableType, Uid

__all__ = [
    # Value objects
    "DeletableType",
    "Uid",
    # Entities
    "IdentifiableObject",
    "RelationshipType",
    "Relationship",
    "IndicatorType",
    "Indicator",
    # Deletion
    "DeletionListener",
    "DeletionVeto",
    "DeletionDecision",
    "DeletionOutcome",
    "VetoFunction",
    # Events
    "DomainEvent",
    "IEventBus",
    "ObjectDeletionRequested",
    "DeletionVetoed",
    "ObjectDeleted",
    # Exceptions
    "DeletionError",
    "DeleteNotAllowedError",
    "DuplicateListenerError",
    "RegistryFrozenError",
    "ObjectNotFoundError",
    # Repositories
    "IObjectRepository",
    "IRelationshipRepository",
    "IIndicatorRepository",
]
