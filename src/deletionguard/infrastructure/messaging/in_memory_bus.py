# SPDX-License-Identifier: Apache-2.0
"""In-memory event bus implementation.

Concrete implementation of the IEventBus protocol with synchronous delivery
in subscription order.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Callable, Dict, List, Type

from deletionguard.domain.events import DomainEvent, IEventBus

Subscriber = Callable[[DomainEvent], None]

logger = logging.getLogger(__name__)


class InMemoryEventBus(IEventBus):
    """Simple in-memory event bus for domain events.

    Subscribers are keyed by the exact event class. A failing subscriber is
    logged and does not prevent delivery to the remaining subscribers, since
    events describe things that already happened.
    """

    def __init__(self) -> None:
        self._subs: Dict[Type[DomainEvent], List[Subscriber]] = defaultdict(list)

    def subscribe(self, etype: Type[DomainEvent], fn: Subscriber) -> None:
        """Subscribe a function to handle events of a specific type.

        Args:
            etype: The type of domain event to subscribe to
            fn: Function that will handle events of this type
        """
        self._subs[etype].append(fn)

    def publish(self, event: DomainEvent) -> None:
        """Publish an event to all subscribers.

        Args:
            event: The domain event to publish
        """
        for fn in list(self._subs.get(type(event), ())):
            try:
                fn(event)
            except Exception:
                logger.exception("Subscriber %r failed handling %s", fn, event)

    def subscriber_count(self, etype: Type[DomainEvent]) -> int:
        return len(self._subs.get(etype, ()))

    def clear_subscriptions(self) -> None:
        """Clear all subscriptions (useful for testing)."""
        self._subs.clear()


__all__ = ["InMemoryEventBus"]
