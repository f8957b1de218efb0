"""Public configuration API for pawfetch."""

from __future__ import annotations

from .file import ConfigFileNames, ConfigStoreSettings, FileConfigStore
from .models import (
    ConfigError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigScope,
    ConfigValidationError,
    ConfigYamlError,
    DecodingConfig,
    GlobalConfig,
    PawfetchConfig,
    ProjectConfig,
)
from .protocol import ConfigStore

__all__ = [
    "ConfigError",
    "ConfigFileNames",
    "ConfigIOError",
    "ConfigNotFoundError",
    "ConfigScope",
    "ConfigStore",
    "ConfigStoreSettings",
    "ConfigValidationError",
    "ConfigYamlError",
    "DecodingConfig",
    "FileConfigStore",
    "GlobalConfig",
    "PawfetchConfig",
    "ProjectConfig",
]
