# SPDX-License-Identifier: Apache-2.0
"""Deletion listener, veto and decision types.

A deletion listener guards objects of exactly one ``DeletableType``. When a
deletion is requested it either accepts (returns ``None``) or refuses by
returning a ``DeletionVeto`` explaining what still references the object.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from .entities import IdentifiableObject
from .value_objects import DeletableType

VETO_PREFIX = "Object could not be deleted because it is associated with another object"

VetoFunction = Callable[[IdentifiableObject], Optional["DeletionVeto"]]


@dataclass(frozen=True)
class DeletionVeto:
    """Refusal to allow a deletion.

    Attributes:
        object_type: Type of the objects that still reference the target
        message: Optional free text; defaults to the referencing type name
        count: Number of referencing objects, when known
    """

    object_type: DeletableType
    message: Optional[str] = None
    count: Optional[int] = None

    def __post_init__(self):
        if self.count is not None and self.count < 0:
            raise ValueError(f"Veto count cannot be negative: {self.count}")

    @property
    def reason(self) -> str:
        """Human-readable explanation surfaced to the user."""
        detail = self.message or self.object_type.display_name
        if self.count is not None:
            detail = f"{detail} ({self.count})"
        return f"{VETO_PREFIX}: {detail}"

    def __str__(self) -> str:
        return self.reason


class DeletionOutcome(str, Enum):
    PENDING = "pending"
    ALLOWED = "allowed"
    VETOED = "vetoed"


@dataclass(frozen=True)
class DeletionDecision:
    """Result of running a deletion request through the registry."""

    object_type: DeletableType
    outcome: DeletionOutcome
    veto: Optional[DeletionVeto] = None
    vetoed_by: Optional[str] = None
    listeners_run: int = 0

    def __post_init__(self):
        if self.outcome is DeletionOutcome.VETOED and self.veto is None:
            raise ValueError("A vetoed decision must carry a veto")
        if self.outcome is not DeletionOutcome.VETOED and self.veto is not None:
            raise ValueError(f"A {self.outcome.value} decision cannot carry a veto")

    @property
    def allowed(self) -> bool:
        return self.outcome is DeletionOutcome.ALLOWED

    @property
    def vetoed(self) -> bool:
        return self.outcome is DeletionOutcome.VETOED


@dataclass(frozen=True)
class DeletionListener:
    """Veto function bound to the single object type it guards."""

    object_type: DeletableType
    fn: VetoFunction = field(compare=True)
    name: str = ""

    def __post_init__(self):
        if not callable(self.fn):
            raise TypeError(f"Deletion listener function must be callable, got {type(self.fn)}")
        if not self.name:
            object.__setattr__(
                self, "name", getattr(self.fn, "__qualname__", None) or repr(self.fn)
            )

    def on_deletion_requested(self, obj: IdentifiableObject) -> Optional[DeletionVeto]:
        """Ask the listener whether ``obj`` may be deleted.

        Returns:
            ``None`` to accept, a ``DeletionVeto`` to refuse
        """
        return self.fn(obj)

    def __str__(self) -> str:
        return f"{self.name} [{self.object_type}]"
