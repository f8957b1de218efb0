"""Environment variable resolution helpers for configuration."""

from __future__ import annotations

import os

import yaml

from pawfetch.common import JsonDict
from pawfetch.constants import ENV_PREFIX
from pawfetch.utils.dicts import deep_merge, insert_path

from .models import PawfetchConfig


def apply_env_overrides(config: PawfetchConfig) -> PawfetchConfig:
    """Apply ``PAWFETCH_CONFIG__SECTION__KEY=value`` overrides to config.

    Values are parsed as YAML so that booleans, numbers and lists keep their type.
    """
    overrides: JsonDict = {}

    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        segments = [segment.lower() for segment in key[len(ENV_PREFIX) :].split("__") if segment]
        if not segments:
            continue
        insert_path(overrides, segments, _parse_env_value(value))

    if not overrides:
        return config

    base = config.model_dump(mode="json")
    _drop_retyped_sources(base, overrides)
    return PawfetchConfig.model_validate(deep_merge(base, overrides))


def _drop_retyped_sources(base: JsonDict, overrides: JsonDict) -> None:
    """Forget a base source entry whose ``type`` the overrides change, so it is replaced whole."""
    source_overrides = overrides.get("sources")
    if not isinstance(source_overrides, dict):
        return
    base_sources = base.get("sources", {})
    for name, entry in source_overrides.items():
        current = base_sources.get(name)
        if not (isinstance(entry, dict) and isinstance(current, dict)):
            continue
        if entry.get("type", current["type"]) != current["type"]:
            del base_sources[name]


def _parse_env_value(raw: str) -> object:
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw
