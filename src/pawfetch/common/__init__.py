"""Common models and helpers used across pawfetch modules."""

from pawfetch.utils import AppDirectories
from pawfetch.utils.types import HostUrl, JsonDict, JsonValue, NonEmptyString, ResourcePath

from .logging import LoggingConfig, create_logger, disable_library_logging, enable_library_logging, setup_cli_logging
from .models import AppInfo, AppPaths
from .paths import (
    get_data_root,
    get_global_config_root,
    get_log_file,
    get_preferences_file,
    get_project_root,
    resolve_working_directory,
)

__all__ = [
    "AppDirectories",
    "AppInfo",
    "AppPaths",
    "HostUrl",
    "JsonDict",
    "JsonValue",
    "LoggingConfig",
    "NonEmptyString",
    "ResourcePath",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
    "get_data_root",
    "get_global_config_root",
    "get_log_file",
    "get_preferences_file",
    "get_project_root",
    "resolve_working_directory",
    "setup_cli_logging",
]
