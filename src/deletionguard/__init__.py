# SPDX-License-Identifier: Apache-2.0
"""deletionguard package initialization.

Pre-deletion veto checks for metadata objects: a process-wide registry of
deletion listeners keyed by object type.
"""

import logging

from .domain import (
    DeletableType,
    DeleteNotAllowedError,
    DeletionDecision,
    DeletionListener,
    DeletionVeto,
    ObjectDeletionRequested,
)
from .infrastructure.deletion_registry import DeletionRegistry

__version__ = "0.1.0"

# Audit lines stay off until bootstrap applies the audit_log setting
logging.getLogger("deletionguard.audit").setLevel(logging.WARNING)

__all__ = [
    "DeletableType",
    "DeleteNotAllowedError",
    "DeletionDecision",
    "DeletionListener",
    "DeletionRegistry",
    "DeletionVeto",
    "ObjectDeletionRequested",
    "__version__",
]
