"""
Configuration Loader - YAML Files, Profiles and Environment.

A configuration is one YAML file validated into ``DirectoryConfig``.
A profile is a partial YAML file in a ``profiles/`` directory next to
it; its keys are deep-merged over the base file:

    config/default.yaml
    config/profiles/development.yaml

The API process picks both up from the environment
(``PATIENT_DIRECTORY_CONFIG``, ``PATIENT_DIRECTORY_PROFILE``).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from patient_directory.config.models import DirectoryConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PATIENT_DIRECTORY_CONFIG"
PROFILE_ENV_VAR = "PATIENT_DIRECTORY_PROFILE"


def deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Merge ``overlay`` into a copy of ``base``; nested mappings merge key by key."""
    merged = dict(base)
    for key, value in overlay.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def read_yaml(path: Path) -> Dict[str, Any]:
    """Read a YAML mapping; an empty file reads as ``{}``."""
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


class ConfigLoader:
    """Loads and validates configuration from YAML files."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Args:
            base_path: Directory relative config paths are resolved against
        """
        self._base_path = Path(base_path) if base_path is not None else Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> DirectoryConfig:
        """
        Load a configuration file, optionally overlaid with a profile.

        Args:
            config_path: YAML file, absolute or relative to ``base_path``
            profile: Name of ``profiles/<profile>.yaml`` beside the file

        Raises:
            FileNotFoundError: If the file or the profile does not exist
            pydantic.ValidationError: If the merged values are invalid
        """
        path = Path(config_path)
        if not path.is_absolute():
            path = self._base_path / path

        values = read_yaml(path)
        if profile:
            profile_path = path.parent / "profiles" / f"{profile}.yaml"
            if not profile_path.exists():
                raise FileNotFoundError(f"Profile not found: {profile} ({profile_path})")
            values = deep_merge(values, read_yaml(profile_path))

        logger.info(f"Loaded configuration {path} (profile: {profile or 'none'})")
        return DirectoryConfig.model_validate(values)

    def load_from_dict(self, values: Dict[str, Any]) -> DirectoryConfig:
        return DirectoryConfig.model_validate(values)


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> DirectoryConfig:
    """
    Resolve the configuration for a process.

    Explicit arguments win over ``PATIENT_DIRECTORY_CONFIG`` /
    ``PATIENT_DIRECTORY_PROFILE``; with no file at all the built-in
    defaults are returned.
    """
    config_path = config_path or os.environ.get(CONFIG_ENV_VAR)
    if not config_path:
        return DirectoryConfig()
    profile = profile or os.environ.get(PROFILE_ENV_VAR)
    return ConfigLoader(base_path=base_path).load(config_path, profile)
