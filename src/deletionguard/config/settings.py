# SPDX-License-Identifier: Apache-2.0
"""Pydantic configuration model for the deletion subsystem."""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Configuration versioning constants
CURRENT_CONFIG_VERSION = "1"
MIN_SUPPORTED_VERSION = "1"


class DuplicateListenerPolicy(str, Enum):
    """What the registry does when the same listener is registered twice for a type."""

    REJECT = "reject"
    IGNORE = "ignore"
    ALLOW = "allow"


class DeletionSettings(BaseModel):
    """Settings for building the process-wide deletion registry.

    Loaded from YAML with snake_case or kebab-case field names, see
    ``deletionguard.config.loader.load_settings``.
    """

    model_config = ConfigDict(extra="forbid")

    config_version: str = Field(
        default=CURRENT_CONFIG_VERSION, description="Configuration schema version"
    )
    duplicate_listeners: DuplicateListenerPolicy = Field(
        default=DuplicateListenerPolicy.REJECT,
        description="Policy for registering the same listener twice for one type",
    )
    freeze_after_bootstrap: bool = Field(
        default=True,
        description="Reject further registrations once bootstrap has registered all handlers",
    )
    log_level: str = Field(default="INFO", description="Root log level for the CLI")
    audit_log: bool = Field(
        default=False,
        description="Emit an INFO line on the deletionguard.audit logger for every deletion and veto",
    )

    @field_validator("duplicate_listeners", mode="before")
    @classmethod
    def normalize_policy(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level against the standard logging names."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level
