"""Persistence error models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PersistError(BaseModel):
    """A save attempt failed to serialize or write."""

    model_config = ConfigDict(extra="forbid")

    message: str
    key: str
