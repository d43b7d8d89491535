# SPDX-License-Identifier: Apache-2.0
"""Monitoring infrastructure: metrics and audit logging driven by domain events."""

from __future__ import annotations

from .event_handlers import configure_audit_logging, register

__all__ = ["configure_audit_logging", "register"]
