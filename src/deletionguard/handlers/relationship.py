# SPDX-License-Identifier: Apache-2.0
"""Deletion handler for relationship metadata."""

from __future__ import annotations

from typing import Optional

from deletionguard.domain.deletion import DeletionVeto
from deletionguard.domain.entities import RelationshipType
from deletionguard.domain.repositories import IRelationshipRepository
from deletionguard.domain.value_objects import DeletableType

from .base import DeletionHandler


class RelationshipDeletionHandler(DeletionHandler):
    """A relationship type cannot be deleted while relationships of that type exist."""

    def __init__(self, relationship_repository: IRelationshipRepository):
        super().__init__()
        self._relationships = relationship_repository

    def register(self) -> None:
        self.when_vetoing(DeletableType.RELATIONSHIP_TYPE, self.allow_delete_relationship_type)

    def allow_delete_relationship_type(
        self, relationship_type: RelationshipType
    ) -> Optional[DeletionVeto]:
        relationships = self._relationships.get_relationships_by_relationship_type(
            relationship_type
        )
        if not relationships:
            return None
        return DeletionVeto(DeletableType.RELATIONSHIP, count=len(relationships))
