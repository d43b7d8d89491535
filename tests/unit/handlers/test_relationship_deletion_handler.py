# SPDX-License-Identifier: Apache-2.0
"""Tests for the relationship deletion handler."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from deletionguard.domain.entities import Relationship, RelationshipType
from deletionguard.domain.events import ObjectDeletionRequested
from deletionguard.domain.exceptions import DeleteNotAllowedError
from deletionguard.domain.repositories import IRelationshipRepository
from deletionguard.domain.value_objects import DeletableType, Uid
from deletionguard.handlers import RelationshipDeletionHandler
from deletionguard.infrastructure.deletion_registry import DeletionRegistry


class TestRelationshipDeletionHandler:
    def setup_method(self):
        self.relationship_repository = Mock(spec=IRelationshipRepository)
        self.deletion_manager = DeletionRegistry()
        self.handler = RelationshipDeletionHandler(self.relationship_repository)
        self.handler.set_manager(self.deletion_manager)
        self.handler.init()

    def test_deny_delete_relationship_type_with_data(self):
        relationship_type = RelationshipType(Uid.generate(), "Mother-Child")
        self.relationship_repository.get_relationships_by_relationship_type.return_value = [
            Relationship(Uid.generate(), "Jane -> Joe", relationship_type=relationship_type.uid)
        ]

        with pytest.raises(DeleteNotAllowedError) as exc_info:
            self.deletion_manager.dispatch(ObjectDeletionRequested(relationship_type))

        assert exc_info.value.veto.count == 1
        assert exc_info.value.vetoed_by == (
            "RelationshipDeletionHandler.allow_delete_relationship_type"
        )
        self.relationship_repository.get_relationships_by_relationship_type.assert_called_once_with(
            relationship_type
        )

    def test_allow_delete_relationship_type_without_data(self):
        relationship_type = RelationshipType(Uid.generate(), "Sibling")
        self.relationship_repository.get_relationships_by_relationship_type.return_value = []

        decision = self.deletion_manager.dispatch(ObjectDeletionRequested(relationship_type))

        assert decision.allowed

    def test_relationship_deletion_is_not_guarded(self):
        relationship = Relationship(Uid.generate(), "Jane -> Joe", relationship_type=Uid.generate())

        decision = self.deletion_manager.dispatch(ObjectDeletionRequested(relationship))

        assert decision.allowed
        self.relationship_repository.get_relationships_by_relationship_type.assert_not_called()

    def test_registers_one_listener(self):
        assert [l.object_type for l in self.handler.listeners] == [DeletableType.RELATIONSHIP_TYPE]

    def test_init_twice_is_rejected_as_duplicate(self):
        from deletionguard.domain.exceptions import DuplicateListenerError

        with pytest.raises(DuplicateListenerError):
            self.handler.init()


def test_init_without_manager_fails():
    handler = RelationshipDeletionHandler(Mock(spec=IRelationshipRepository))

    with pytest.raises(RuntimeError, match="has no deletion manager set"):
        handler.init()


def test_when_vetoing_without_manager_fails():
    handler = RelationshipDeletionHandler(Mock(spec=IRelationshipRepository))

    with pytest.raises(RuntimeError, match="has no deletion manager set"):
        handler.when_vetoing(DeletableType.RELATIONSHIP_TYPE, lambda obj: None)
    assert handler.listeners == []
