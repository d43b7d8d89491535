# SPDX-License-Identifier: Apache-2.0
"""Bootstrap module for deletionguard initialization.

Builds the process-wide deletion registry, registers every deletion handler
and monitoring subscriber, then freezes the registry so it is read-only for
the rest of the process. Bootstrap is invoked lazily by CLI commands so that
importing the package has no side effects.
"""

from __future__ import annotations

__all__ = [
    "bootstrap",
    "is_bootstrapped",
    "reset_bootstrap_state",
    "get_deletion_registry",
    "get_event_bus",
    "get_catalog",
    "get_settings",
    "get_deletion_service",
]

import logging
import threading
from typing import TYPE_CHECKING, Optional

from deletionguard.config import DeletionSettings, resolve_settings

if TYPE_CHECKING:
    from deletionguard.application.services import DeletionService
    from deletionguard.domain.events import IEventBus
    from deletionguard.infrastructure.deletion_registry import DeletionRegistry
    from deletionguard.infrastructure.repositories.in_memory import InMemoryCatalog

# Global flag to ensure bootstrap only runs once per process
_BOOTSTRAPPED = False
_BOOTSTRAP_LOCK = threading.Lock()

_SETTINGS: Optional[DeletionSettings] = None
_REGISTRY: Optional["DeletionRegistry"] = None
_EVENT_BUS: Optional["IEventBus"] = None
_CATALOG: Optional["InMemoryCatalog"] = None

logger = logging.getLogger(__name__)


def bootstrap(
    settings: Optional[DeletionSettings] = None,
    catalog: Optional["InMemoryCatalog"] = None,
) -> None:
    """Initialize the deletion registry and its handlers.

    This function is idempotent and safe to call multiple times. It will only
    perform initialization once per process.

    Args:
        settings: Settings to use; resolved from ``$DELETIONGUARD_CONFIG`` or
            defaults when omitted
        catalog: Repository the handlers query; an empty in-memory catalog
            when omitted
    """
    global _BOOTSTRAPPED, _SETTINGS, _REGISTRY, _CATALOG

    with _BOOTSTRAP_LOCK:
        if _BOOTSTRAPPED:
            logger.debug("Bootstrap already completed, skipping")
            return

        logger.info("Starting deletionguard bootstrap initialization...")

        try:
            from deletionguard.handlers import create_default_handlers
            from deletionguard.infrastructure.deletion_registry import DeletionRegistry
            from deletionguard.infrastructure.monitoring.event_handlers import (
                configure_audit_logging,
                register,
            )
            from deletionguard.infrastructure.repositories.in_memory import InMemoryCatalog

            resolved = settings or resolve_settings()
            registry = DeletionRegistry(duplicate_policy=resolved.duplicate_listeners)
            store = catalog if catalog is not None else InMemoryCatalog()

            for handler in create_default_handlers(store):
                logger.debug("Registering %s", handler.__class__.__name__)
                handler.set_manager(registry)
                handler.init()

            logger.debug("Registering monitoring event handlers")
            register(get_event_bus())
            configure_audit_logging(resolved.audit_log)

            if resolved.freeze_after_bootstrap:
                registry.freeze()

            _SETTINGS = resolved
            _REGISTRY = registry
            _CATALOG = store
            _BOOTSTRAPPED = True
            logger.info(
                "deletionguard bootstrap completed with %d deletion listener(s)",
                registry.listener_count(),
            )

        except Exception as e:
            logger.error(f"Bootstrap failed: {e}")
            raise RuntimeError(f"deletionguard bootstrap failed: {e}") from e


def is_bootstrapped() -> bool:
    """Check if bootstrap has been completed."""
    return _BOOTSTRAPPED


def reset_bootstrap_state() -> None:
    """Reset bootstrap state for testing purposes.

    Drops the global registry, event bus and catalog so the next bootstrap
    starts from scratch and turns audit logging back off.
    """
    global _BOOTSTRAPPED, _SETTINGS, _REGISTRY, _EVENT_BUS, _CATALOG
    from deletionguard.infrastructure.monitoring.event_handlers import configure_audit_logging

    with _BOOTSTRAP_LOCK:
        _BOOTSTRAPPED = False
        _SETTINGS = None
        _REGISTRY = None
        _EVENT_BUS = None
        _CATALOG = None
    configure_audit_logging(False)
    logger.debug("Bootstrap state reset for testing")


def get_event_bus() -> "IEventBus":
    """Get the global event bus instance, created lazily on first access."""
    global _EVENT_BUS
    if _EVENT_BUS is None:
        from deletionguard.infrastructure.messaging.in_memory_bus import InMemoryEventBus

        _EVENT_BUS = InMemoryEventBus()
    return _EVENT_BUS


def get_deletion_registry() -> "DeletionRegistry":
    """Get the process-wide deletion registry, bootstrapping on first access."""
    bootstrap()
    assert _REGISTRY is not None
    return _REGISTRY


def get_catalog() -> "InMemoryCatalog":
    bootstrap()
    assert _CATALOG is not None
    return _CATALOG


def get_settings() -> DeletionSettings:
    bootstrap()
    assert _SETTINGS is not None
    return _SETTINGS


def get_deletion_service() -> "DeletionService":
    """Build a deletion service wired to the global registry, catalog and event bus."""
    from deletionguard.application.services import DeletionService

    return DeletionService(get_deletion_registry(), get_catalog(), get_event_bus())
