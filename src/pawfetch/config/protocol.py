"""Configuration storage protocol."""

from typing import Protocol

from result import Result

from .models import ConfigError, PawfetchConfig


class ConfigStore(Protocol):
    """Protocol for configuration retrieval."""

    def load(self) -> Result[PawfetchConfig, ConfigError]:
        """Load and merge configuration from all scopes."""
        ...
