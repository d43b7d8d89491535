# SPDX-License-Identifier: Apache-2.0
"""Prometheus metrics for the deletion subsystem."""

from __future__ import annotations

from prometheus_client import Counter, Gauge, Histogram

DELETION_REQUESTS = Counter(
    "dg_deletion_requests_total", "Deletion requests dispatched", ["object_type"]
)
DELETION_VETOES = Counter(
    "dg_deletion_vetoes_total", "Deletion requests vetoed by a listener", ["object_type"]
)
OBJECTS_DELETED = Counter("dg_objects_deleted_total", "Objects deleted", ["object_type"])
DISPATCH_LATENCY = Histogram(
    "dg_dispatch_latency_seconds",
    "Time spent running deletion listeners for one request",
    ["object_type"],
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1, 5],
)
REGISTERED_LISTENERS = Gauge(
    "dg_registered_listeners", "Deletion listeners registered per object type", ["object_type"]
)

__all__ = [
    "DELETION_REQUESTS",
    "DELETION_VETOES",
    "OBJECTS_DELETED",
    "DISPATCH_LATENCY",
    "REGISTERED_LISTENERS",
]
