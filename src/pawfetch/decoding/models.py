"""Decoding error models and key strategies."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class KeyDecodingStrategy(str, Enum):
    """How object keys in a payload map onto field names."""

    USE_DEFAULT_KEYS = "use_default_keys"
    CONVERT_FROM_CAMEL_CASE = "convert_from_camel_case"


class DecodingError(BaseModel):
    """Bytes were retrieved but did not parse as the requested type."""

    model_config = ConfigDict(extra="forbid")

    message: str
    target: str
