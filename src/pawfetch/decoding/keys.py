"""Key rewriting applied before validation."""

from __future__ import annotations

import re

from pawfetch.utils.types import JsonValue

from .models import KeyDecodingStrategy

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def camel_to_snake(key: str) -> str:
    """``heightInCentimeters`` -> ``height_in_centimeters``; ``URLPath`` -> ``url_path``."""
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def apply_key_strategy(data: JsonValue, strategy: KeyDecodingStrategy) -> JsonValue:
    match strategy:
        case KeyDecodingStrategy.USE_DEFAULT_KEYS:
            return data
        case KeyDecodingStrategy.CONVERT_FROM_CAMEL_CASE:
            return _rewrite_keys(data)


def _rewrite_keys(data: JsonValue) -> JsonValue:
    if isinstance(data, dict):
        return {camel_to_snake(key): _rewrite_keys(value) for key, value in data.items()}
    if isinstance(data, list):
        return [_rewrite_keys(item) for item in data]
    return data
