"""Fetch error models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from pawfetch.decoding.models import DecodingError


class DataNotFoundError(BaseModel):
    """The transfer ran but produced no bytes (network failure, missing file, empty body)."""

    model_config = ConfigDict(extra="forbid")

    message: str = "An error occurred while fetching the data."
    location: str


type FetchError = DataNotFoundError | DecodingError


__all__ = ["DataNotFoundError", "DecodingError", "FetchError"]
