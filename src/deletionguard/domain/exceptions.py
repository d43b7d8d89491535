# SPDX-License-Identifier: Apache-2.0
"""Exceptions raised by the deletion subsystem."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .deletion import DeletionListener, DeletionVeto
    from .value_objects import DeletableType, Uid


class DeletionError(Exception):
    """Base class for deletionguard errors."""


class DeleteNotAllowedError(DeletionError):
    """A listener vetoed the deletion.

    This is an expected, user-facing outcome. The message is the veto reason.
    """

    def __init__(self, veto: DeletionVeto, vetoed_by: str | None = None):
        super().__init__(veto.reason)
        self.veto = veto
        self.vetoed_by = vetoed_by


class RegistryFrozenError(DeletionError):
    """Registration attempted after the registry was frozen."""


class DuplicateListenerError(DeletionError):
    """The same listener was registered twice for one type."""

    def __init__(self, listener: DeletionListener):
        super().__init__(f"Listener {listener} is already registered for {listener.object_type}")
        self.listener = listener


class ObjectNotFoundError(DeletionError):
    def __init__(self, object_type: DeletableType, uid: Uid | str):
        super().__init__(f"{object_type.display_name} '{uid}' not found")
        self.object_type = object_type
        self.uid = uid
