"""
Configuration Package - Models and Loaders.

This package handles all configuration aspects of the Patient Directory:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Support for configuration profiles

Configuration Structure:
    - DirectoryConfig: Root configuration object
    - DataSourceConfig: Dataset location
    - PaginationConfig: Page/limit defaults and bounds
    - SortingConfig: Sortable fields
    - FilterToggleConfig: Enabled filter stages
    - LoggingConfig: Log level and renderer
"""

from patient_directory.config.loader import (
    CONFIG_ENV_VAR,
    PROFILE_ENV_VAR,
    ConfigLoader,
    deep_merge,
    load_config,
)
from patient_directory.config.models import (
    DataSourceConfig,
    DirectoryConfig,
    FilterToggleConfig,
    LoggingConfig,
    PaginationConfig,
    SortingConfig,
)

__all__ = [
    "CONFIG_ENV_VAR",
    "PROFILE_ENV_VAR",
    "ConfigLoader",
    "deep_merge",
    "load_config",
    "DataSourceConfig",
    "DirectoryConfig",
    "FilterToggleConfig",
    "LoggingConfig",
    "PaginationConfig",
    "SortingConfig",
]
