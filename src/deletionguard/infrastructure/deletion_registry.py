# SPDX-License-Identifier: Apache-2.0
"""In-memory deletion registry.

Maps a ``DeletableType`` to the ordered listeners guarding it. Registration
happens during bootstrap under a lock and replaces the whole type-to-tuple
mapping, so readers always see a consistent snapshot and dispatch never holds
the lock while a listener runs.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Dict, List, Optional, Tuple

from deletionguard.config.settings import DuplicateListenerPolicy
from deletionguard.domain.deletion import (
    DeletionDecision,
    DeletionListener,
    DeletionOutcome,
    VetoFunction,
)
from deletionguard.domain.events import ObjectDeletionRequested
from deletionguard.domain.exceptions import (
    DeleteNotAllowedError,
    DuplicateListenerError,
    RegistryFrozenError,
)
from deletionguard.domain.value_objects import DeletableType
from deletionguard.metrics import (
    DELETION_REQUESTS,
    DELETION_VETOES,
    DISPATCH_LATENCY,
    REGISTERED_LISTENERS,
)

logger = logging.getLogger(__name__)


class DeletionRegistry:
    """Type-keyed registry of deletion listeners with veto semantics.

    Listeners for a type run in registration order. The first listener that
    returns a veto stops dispatch. Only exact type matches are dispatched.
    """

    def __init__(
        self, duplicate_policy: DuplicateListenerPolicy = DuplicateListenerPolicy.REJECT
    ) -> None:
        self._listeners: Dict[DeletableType, Tuple[DeletionListener, ...]] = {}
        self._lock = threading.Lock()
        self._frozen = False
        self._duplicate_policy = DuplicateListenerPolicy(duplicate_policy)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, object_type: DeletableType, listener: DeletionListener) -> None:
        """Append ``listener`` to the ordered listeners for ``object_type``.

        Args:
            object_type: The type the listener guards
            listener: Listener whose ``object_type`` must equal ``object_type``

        Raises:
            RegistryFrozenError: If the registry has been frozen
            DuplicateListenerError: If the listener is already registered and
                the duplicate policy is ``reject``
            ValueError: If the listener guards a different type
        """
        object_type = DeletableType(object_type)
        if listener.object_type is not object_type:
            raise ValueError(
                f"Listener {listener} guards {listener.object_type}, cannot register it for "
                f"{object_type}"
            )

        with self._lock:
            if self._frozen:
                raise RegistryFrozenError(
                    f"Cannot register {listener}: deletion registry is frozen"
                )

            existing = self._listeners.get(object_type, ())
            if listener in existing:
                if self._duplicate_policy is DuplicateListenerPolicy.REJECT:
                    raise DuplicateListenerError(listener)
                if self._duplicate_policy is DuplicateListenerPolicy.IGNORE:
                    logger.warning("Ignoring duplicate deletion listener %s", listener)
                    return

            listeners = dict(self._listeners)
            listeners[object_type] = existing + (listener,)
            self._listeners = listeners
            REGISTERED_LISTENERS.labels(object_type=object_type.value).set(
                len(listeners[object_type])
            )

        logger.debug("Registered deletion listener %s", listener)

    def when_vetoing(
        self, object_type: DeletableType, fn: VetoFunction, name: Optional[str] = None
    ) -> DeletionListener:
        """Wrap ``fn`` in a listener for ``object_type`` and register it."""
        listener = DeletionListener(object_type=object_type, fn=fn, name=name or "")
        self.register(object_type, listener)
        return listener

    def freeze(self) -> None:
        """Reject every further registration."""
        with self._lock:
            self._frozen = True
        logger.debug("Deletion registry frozen with %d listeners", self.listener_count())

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def evaluate(self, event: ObjectDeletionRequested) -> DeletionDecision:
        """Run ``event`` through the listeners for its type without raising on veto.

        Returns:
            ``ALLOWED`` if every listener accepted (or none is registered),
            otherwise ``VETOED`` with the first veto

        Raises:
            TypeError: If the object carries no deletable type
        """
        object_type = event.object_type
        listeners = self._listeners.get(object_type, ())
        DELETION_REQUESTS.labels(object_type=object_type.value).inc()

        start = time.perf_counter()
        run = 0
        try:
            for listener in listeners:
                run += 1
                try:
                    veto = listener.on_deletion_requested(event.source)
                except Exception:
                    logger.error(
                        "Deletion listener %s failed for %s %s",
                        listener,
                        object_type,
                        event.source.uid,
                    )
                    raise

                if veto is not None:
                    DELETION_VETOES.labels(object_type=object_type.value).inc()
                    logger.info(
                        "Deletion of %s %s vetoed by %s: %s",
                        object_type,
                        event.source.uid,
                        listener.name,
                        veto.reason,
                    )
                    return DeletionDecision(
                        object_type=object_type,
                        outcome=DeletionOutcome.VETOED,
                        veto=veto,
                        vetoed_by=listener.name,
                        listeners_run=run,
                    )
        finally:
            DISPATCH_LATENCY.labels(object_type=object_type.value).observe(
                time.perf_counter() - start
            )

        return DeletionDecision(
            object_type=object_type, outcome=DeletionOutcome.ALLOWED, listeners_run=run
        )

    def dispatch(self, event: ObjectDeletionRequested) -> DeletionDecision:
        """Run ``event`` through the listeners for its type.

        Returns:
            The ``ALLOWED`` decision

        Raises:
            DeleteNotAllowedError: If a listener vetoed the deletion
        """
        decision = self.evaluate(event)
        if decision.vetoed:
            raise DeleteNotAllowedError(decision.veto, vetoed_by=decision.vetoed_by)
        return decision

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def listeners_for(self, object_type: DeletableType) -> Tuple[DeletionListener, ...]:
        """Listeners for ``object_type`` in dispatch order."""
        return self._listeners.get(DeletableType(object_type), ())

    def registered_types(self) -> List[DeletableType]:
        """Types with at least one listener, in enumeration order."""
        return [t for t in DeletableType if self._listeners.get(t)]

    def listener_count(self) -> int:
        return sum(len(listeners) for listeners in self._listeners.values())

    def clear(self) -> None:
        """Remove all listeners and unfreeze (useful for testing)."""
        with self._lock:
            for object_type in self._listeners:
                REGISTERED_LISTENERS.labels(object_type=object_type.value).set(0)
            self._listeners = {}
            self._frozen = False
