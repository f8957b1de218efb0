from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pawfetch.common import get_global_config_root, get_project_root

from .settings import ConfigStoreSettings


@dataclass(frozen=True, slots=True)
class ResolvedConfigPaths:
    global_path: Path | None
    project_path: Path | None


def discover_config_paths(working_dir: Path, settings: ConfigStoreSettings) -> ResolvedConfigPaths:
    directories = settings.directories

    global_candidate = get_global_config_root(directories) / settings.filenames.global_file

    project_candidate = None
    project_root = get_project_root(working_dir, directories)
    if project_root is not None:
        project_candidate = project_root / directories.project_marker / settings.filenames.project_file

    return ResolvedConfigPaths(
        global_path=global_candidate if global_candidate.is_file() else None,
        project_path=project_candidate if project_candidate and project_candidate.is_file() else None,
    )
