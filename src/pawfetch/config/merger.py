"""Configuration merging utilities."""

from __future__ import annotations

from pawfetch.utils.dicts import deep_merge, strip_none

from .models import GlobalConfig, PawfetchConfig, ProjectConfig


def merge_configs(global_cfg: GlobalConfig | None, project_cfg: ProjectConfig | None) -> PawfetchConfig:
    """Merge configs with precedence: project > global.

    Settings sections merge key by key; a source entry is replaced as a whole
    so that a project can switch a category from remote to local.
    """
    merged: dict[str, object] = {}
    sources: dict[str, object] = {}

    for scope in (global_cfg, project_cfg):
        if scope is None:
            continue
        data = strip_none(scope.model_dump(mode="json"))
        sources.update(data.pop("sources", {}))
        merged = deep_merge(merged, data)

    merged["sources"] = sources
    return PawfetchConfig.model_validate(merged)
