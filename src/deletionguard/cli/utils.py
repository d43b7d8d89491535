# SPDX-License-Identifier: Apache-2.0
"""Shared helpers for CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from deletionguard.config import ConfigVersionError, DeletionSettings, resolve_settings


def load_cli_settings(config: Optional[Path]) -> DeletionSettings:
    """Resolve settings for a command and configure logging from them."""
    try:
        settings = resolve_settings(config)
    except (ConfigVersionError, FileNotFoundError, ValueError) as e:
        print(f"❌ Configuration error: {e}")
        raise typer.Exit(2)

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return settings
