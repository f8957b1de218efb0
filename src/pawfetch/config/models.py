"""Pydantic models for pawfetch configuration scopes and errors."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pawfetch.common import LoggingConfig
from pawfetch.decoding import KeyDecodingStrategy
from pawfetch.sources import SourceConfig


class ConfigScope(str, Enum):
    """Configuration scope levels."""

    GLOBAL = "global"
    PROJECT = "project"
    EFFECTIVE = "effective"


class ConfigNotFoundError(BaseModel):
    """Configuration file not found at expected location."""

    model_config = ConfigDict(extra="forbid")

    scope: ConfigScope
    expected_path: Path
    message: str


class ConfigYamlError(BaseModel):
    """YAML parsing error in configuration file."""

    model_config = ConfigDict(extra="forbid")

    scope: ConfigScope
    path: Path
    line: int | None = None
    column: int | None = None
    message: str


class ConfigValidationError(BaseModel):
    """Schema validation error in configuration."""

    model_config = ConfigDict(extra="forbid")

    scope: ConfigScope
    path: Path | None = None
    field: str | None = None
    message: str


class ConfigIOError(BaseModel):
    """File I/O error reading configuration."""

    model_config = ConfigDict(extra="forbid")

    scope: ConfigScope
    path: Path
    message: str


type ConfigError = ConfigNotFoundError | ConfigYamlError | ConfigValidationError | ConfigIOError


class DecodingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    key_strategy: KeyDecodingStrategy = KeyDecodingStrategy.USE_DEFAULT_KEYS


class GlobalConfig(BaseModel):
    """Global configuration (~/.config/pawfetch/config.yaml)."""

    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    decoding: DecodingConfig = Field(default_factory=DecodingConfig)
    sources: dict[str, SourceConfig] = Field(default_factory=dict)


class ProjectConfig(BaseModel):
    """Project configuration (.pawfetch/config.yaml)."""

    model_config = ConfigDict(extra="forbid")

    decoding: DecodingConfig | None = None
    sources: dict[str, SourceConfig] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _validate_no_logging(cls, data: object) -> object:
        if isinstance(data, dict) and "logging" in data:
            raise ValueError(
                "Logging configuration can only be set in global config (~/.config/pawfetch/config.yaml). "
                "Remove 'logging' from project config (.pawfetch/config.yaml)."
            )
        return data


class PawfetchConfig(BaseModel):
    """Effective configuration (merged result)."""

    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    decoding: DecodingConfig = Field(default_factory=DecodingConfig)
    sources: dict[str, SourceConfig] = Field(default_factory=dict)
