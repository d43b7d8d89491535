# SPDX-License-Identifier: Apache-2.0
"""Unit tests for the in-memory event bus."""

from __future__ import annotations

from deletionguard.domain.events import DeletionVetoed, ObjectDeleted
from deletionguard.domain.value_objects import DeletableType
from deletionguard.infrastructure.messaging import InMemoryEventBus


def _deleted() -> ObjectDeleted:
    return ObjectDeleted(object_type=DeletableType.RELATIONSHIP_TYPE, uid="RtSibling01")


def test_event_subscription_and_publishing():
    bus = InMemoryEventBus()
    hit = []
    bus.subscribe(ObjectDeleted, lambda e: hit.append(e.uid))

    bus.publish(_deleted())

    assert hit == ["RtSibling01"]


def test_subscribers_called_in_order():
    bus = InMemoryEventBus()
    results = []
    bus.subscribe(ObjectDeleted, lambda e: results.append("handler1"))
    bus.subscribe(ObjectDeleted, lambda e: results.append("handler2"))

    bus.publish(_deleted())

    assert results == ["handler1", "handler2"]


def test_only_exact_event_type_is_delivered():
    bus = InMemoryEventBus()
    hit = []
    bus.subscribe(DeletionVetoed, lambda e: hit.append(e))

    bus.publish(_deleted())

    assert hit == []


def test_failing_subscriber_does_not_block_others(caplog):
    bus = InMemoryEventBus()
    results = []

    def broken(event):
        raise RuntimeError("boom")

    bus.subscribe(ObjectDeleted, broken)
    bus.subscribe(ObjectDeleted, lambda e: results.append("ok"))

    bus.publish(_deleted())

    assert results == ["ok"]
    assert "failed handling" in caplog.text


def test_instances_do_not_share_subscriptions():
    first, second = InMemoryEventBus(), InMemoryEventBus()
    first.subscribe(ObjectDeleted, lambda e: None)

    assert first.subscriber_count(ObjectDeleted) == 1
    assert second.subscriber_count(ObjectDeleted) == 0

    first.clear_subscriptions()
    assert first.subscriber_count(ObjectDeleted) == 0
