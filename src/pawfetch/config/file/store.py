"""File-based configuration store implementation."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError
from result import Err, Ok, Result, do

from pawfetch.common import create_logger

from ..loader import load_global_config, load_project_config, validation_error_details
from ..merger import merge_configs
from ..models import ConfigError, ConfigScope, ConfigValidationError, GlobalConfig, PawfetchConfig, ProjectConfig
from ..resolver import apply_env_overrides
from .paths import discover_config_paths
from .settings import ConfigStoreSettings

logger = create_logger("config")


class FileConfigStore:
    def __init__(self, settings: ConfigStoreSettings, working_dir: Path | None = None) -> None:
        self.working_dir = working_dir or Path.cwd()
        self.settings = settings

    def load(self) -> Result[PawfetchConfig, ConfigError]:
        logger.debug("Loading config", working_dir=str(self.working_dir))
        paths = discover_config_paths(self.working_dir, self.settings)

        logger.debug(
            "Config paths discovered",
            global_path=str(paths.global_path) if paths.global_path else None,
            project_path=str(paths.project_path) if paths.project_path else None,
        )

        merged: Result[PawfetchConfig, ConfigError] = do(
            Ok(merge_configs(global_cfg, project_cfg))
            for global_cfg in self._load_global(paths.global_path)
            for project_cfg in self._load_project(paths.project_path)
        )

        return merged.and_then(self._apply_env).inspect_err(
            lambda error: logger.error("Config load failed", scope=error.scope.value, error=error.message)
        )

    def _load_global(self, path: Path | None) -> Result[GlobalConfig | None, ConfigError]:
        return Ok(None) if path is None else load_global_config(path)

    def _load_project(self, path: Path | None) -> Result[ProjectConfig | None, ConfigError]:
        return Ok(None) if path is None else load_project_config(path)

    def _apply_env(self, config: PawfetchConfig) -> Result[PawfetchConfig, ConfigError]:
        try:
            return Ok(apply_env_overrides(config))
        except ValidationError as exc:
            field, message = validation_error_details(exc)
            return Err(ConfigValidationError(scope=ConfigScope.EFFECTIVE, field=field, message=message))
