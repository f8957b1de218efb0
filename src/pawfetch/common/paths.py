"""Where pawfetch keeps its files.

Config lives under ``$XDG_CONFIG_HOME/pawfetch``; logs and saved favorites
live under ``$XDG_DATA_HOME/pawfetch``. Both fall back to the usual
locations in the home directory when the variables are unset.
"""

from __future__ import annotations

import os
from pathlib import Path

from pawfetch.utils import AppDirectories

LOG_DIR_NAME = "logs"
PREFERENCES_FILENAME = "preferences.json"


def resolve_working_directory(working_dir: Path | None) -> Path:
    base = working_dir or Path.cwd()
    if base.is_file():
        base = base.parent
    try:
        return base.resolve(strict=False)
    except OSError:
        return base


def get_global_config_root(directories: AppDirectories) -> Path:
    return _xdg_home("XDG_CONFIG_HOME", Path(".config")) / directories.app_name


def get_data_root(directories: AppDirectories) -> Path:
    return _xdg_home("XDG_DATA_HOME", Path(".local") / "share") / directories.app_name


def get_preferences_file(directories: AppDirectories, namespace: str) -> Path:
    """``{data_root}/{namespace}/preferences.json``"""
    return get_data_root(directories) / namespace / PREFERENCES_FILENAME


def get_log_file(directories: AppDirectories) -> Path:
    return get_data_root(directories) / LOG_DIR_NAME / f"{directories.app_name}.log"


def get_project_root(start_dir: Path | None, directories: AppDirectories) -> Path | None:
    """Walk up from ``start_dir`` to the first directory holding the project marker."""
    start = resolve_working_directory(start_dir)

    for path in [start, *start.parents]:
        if (path / directories.project_marker).is_dir():
            return path
    return None


def _xdg_home(variable: str, fallback: Path) -> Path:
    configured = os.getenv(variable)
    return Path(configured).expanduser() if configured else Path.home() / fallback
