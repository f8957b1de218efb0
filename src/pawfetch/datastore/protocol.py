"""Preference store protocol."""

from __future__ import annotations

from typing import Protocol

from result import Result

from pawfetch.common import JsonValue

from .models import PreferenceStoreError


class PreferenceStore(Protocol):
    """Key/value store for small JSON preferences (favorites and the like)."""

    def set(self, key: str, value: JsonValue) -> Result[None, PreferenceStoreError]: ...

    def get(self, key: str) -> Result[JsonValue, PreferenceStoreError]: ...

    def remove(self, key: str) -> Result[None, PreferenceStoreError]: ...
