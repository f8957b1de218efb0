"""Reusable Pydantic field annotations."""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, Field, StrictStr

type JsonValue = dict[str, object] | list[object] | str | int | float | bool | None
type JsonDict = dict[str, object]

NonEmptyString = Annotated[StrictStr, Field(min_length=1, frozen=True)]

# Base URL of a remote pet endpoint (e.g., "https://example.com")
HostUrl = Annotated[
    StrictStr,
    Field(
        pattern=r"^https?://[^\s/]+(/[^\s]*)?$",
        frozen=True,
        description="HTTP/HTTPS host URL without the resource path",
    ),
]


def _strip_slashes(value: str) -> str:
    stripped = value.strip("/")
    if not stripped:
        raise ValueError("resource must name a path, not only slashes")
    return stripped


# Resource path appended to a host (e.g., "dogs" or "/v1/cats/"), stored without outer slashes
ResourcePath = Annotated[StrictStr, AfterValidator(_strip_slashes)]

__all__ = [
    "HostUrl",
    "JsonDict",
    "JsonValue",
    "NonEmptyString",
    "ResourcePath",
]
