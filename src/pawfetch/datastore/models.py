"""Preference store error models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PreferenceStoreError(BaseModel):
    """Base preference store error."""

    model_config = ConfigDict(extra="forbid")

    message: str
    namespace: str


class PreferenceReadError(PreferenceStoreError):
    """Error reading the preferences file."""


class PreferenceWriteError(PreferenceStoreError):
    """Error writing the preferences file."""


class PreferenceKeyNotFoundError(PreferenceStoreError):
    """No preference stored under the key."""

    key: str
