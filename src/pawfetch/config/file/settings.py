"""File-based config store settings."""

from __future__ import annotations

from dataclasses import dataclass

from pawfetch.utils import AppDirectories


@dataclass(frozen=True)
class ConfigFileNames:
    """Config file naming convention.

    Attributes:
        global_file: Filename for global config (~/.config/pawfetch/)
        project_file: Filename for project config (.pawfetch/)
    """

    global_file: str = "config.yaml"
    project_file: str = "config.yaml"


@dataclass(frozen=True)
class ConfigStoreSettings:
    """Complete settings for file-based config store."""

    directories: AppDirectories
    filenames: ConfigFileNames
