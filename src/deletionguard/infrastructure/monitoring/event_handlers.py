# SPDX-License-Identifier: Apache-2.0
"""Event handlers for deletion metrics and audit logging.

Subscribes to the deletion outcome events so the domain and application
layers never touch Prometheus directly. Dispatch-level counters (requests,
vetoes, latency) are recorded by the registry itself.
"""

from __future__ import annotations

import logging

from deletionguard.domain.events import DeletionVetoed, IEventBus, ObjectDeleted
from deletionguard.metrics import OBJECTS_DELETED

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger("deletionguard.audit")


def _handle_object_deleted(event: ObjectDeleted) -> None:
    OBJECTS_DELETED.labels(object_type=event.object_type.value).inc()
    audit_logger.info("Deleted %s %s", event.object_type, event.uid)


def _handle_deletion_vetoed(event: DeletionVetoed) -> None:
    audit_logger.info(
        "Refused deletion of %s %s (vetoed by %s): %s",
        event.object_type,
        event.uid,
        event.vetoed_by or "unknown",
        event.reason,
    )


def configure_audit_logging(enabled: bool) -> None:
    """Let audit lines through at INFO when ``enabled``, otherwise only warnings."""
    audit_logger.setLevel(logging.INFO if enabled else logging.WARNING)


def register(event_bus: IEventBus) -> None:
    """Subscribe the monitoring handlers to ``event_bus``."""
    event_bus.subscribe(ObjectDeleted, _handle_object_deleted)
    event_bus.subscribe(DeletionVetoed, _handle_deletion_vetoed)
    logger.debug("Registered deletion monitoring event handlers")
