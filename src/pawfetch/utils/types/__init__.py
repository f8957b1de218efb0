"""Utilities for reusable typed field annotations."""

from .fields import HostUrl, JsonDict, JsonValue, NonEmptyString, ResourcePath

__all__ = [
    "HostUrl",
    "JsonDict",
    "JsonValue",
    "NonEmptyString",
    "ResourcePath",
]
