# SPDX-License-Identifier: Apache-2.0
"""Centralized settings loader with version validation."""

from __future__ import annotations

import os
import warnings
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from .settings import CURRENT_CONFIG_VERSION, MIN_SUPPORTED_VERSION, DeletionSettings

PathLike = Union[str, Path]

CONFIG_ENV_VAR = "DELETIONGUARD_CONFIG"


class ConfigVersionError(RuntimeError):
    """Error when configuration version is incompatible."""
    pass


def load_settings(path: PathLike) -> DeletionSettings:
    """Load and validate settings from a YAML file with version checking.

    Args:
        path: Path to YAML configuration file

    Returns:
        DeletionSettings instance

    Raises:
        ConfigVersionError: If config version is missing, too old, or incompatible
        FileNotFoundError: If the YAML file doesn't exist
        ValueError: If the YAML is invalid or contains invalid settings
    """
    yaml_path = Path(path)
    if not yaml_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        with open(yaml_path, "r") as f:
            yaml_content = f.read()

        expanded_content = os.path.expandvars(yaml_content)

        cfg_dict = yaml.safe_load(expanded_content)
        if not isinstance(cfg_dict, dict):
            raise ValueError("YAML file must contain a dictionary at the root level")

        normalized_data = _normalize_yaml_keys(cfg_dict)

        ver = str(normalized_data.get("config_version", ""))
        if not ver:
            raise ConfigVersionError(
                "config_version missing. Add `config_version: \"1\"` to your YAML."
            )

        try:
            ver_num = int(ver)
        except ValueError:
            raise ConfigVersionError(f"config_version must be an integer, got {ver!r}") from None

        if ver_num < int(MIN_SUPPORTED_VERSION):
            raise ConfigVersionError(
                f"Config version {ver} is too old. "
                f"Minimum supported is {MIN_SUPPORTED_VERSION}. "
                "Please upgrade your configuration."
            )

        if ver_num > int(CURRENT_CONFIG_VERSION):
            warnings.warn(
                f"This release understands config_version {CURRENT_CONFIG_VERSION}, "
                f"but file is {ver}. Attempting best-effort parse.",
                UserWarning,
                stacklevel=2,
            )

        normalized_data["config_version"] = ver
        return DeletionSettings(**normalized_data)

    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in configuration file: {e}") from e
    except ValidationError as e:
        raise ValueError(f"Invalid settings in {path}: {e}") from e


def resolve_settings(path: Optional[PathLike] = None) -> DeletionSettings:
    """Load settings from ``path``, else from ``$DELETIONGUARD_CONFIG``, else defaults."""
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or None
    if path is None:
        return DeletionSettings()
    return load_settings(path)


def _normalize_yaml_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    """Normalize YAML keys from kebab-case to snake_case."""
    return {str(key).replace("-", "_"): value for key, value in data.items()}
