# SPDX-License-Identifier: Apache-2.0
"""Configuration management for deletionguard."""

from .loader import CONFIG_ENV_VAR, ConfigVersionError, load_settings, resolve_settings
from .settings import (
    CURRENT_CONFIG_VERSION,
    MIN_SUPPORTED_VERSION,
    DeletionSettings,
    DuplicateListenerPolicy,
)

__all__ = [
    "DeletionSettings",
    "DuplicateListenerPolicy",
    "CURRENT_CONFIG_VERSION",
    "MIN_SUPPORTED_VERSION",
    "CONFIG_ENV_VAR",
    "load_settings",
    "resolve_settings",
    "ConfigVersionError",
]
