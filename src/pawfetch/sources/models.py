"""Request descriptors and source configuration models."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from pawfetch.common import HostUrl, NonEmptyString, ResourcePath


class RemoteRequest(BaseModel):
    """Where to get bytes from over HTTP."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    method: Literal["GET"] = "GET"
    url: NonEmptyString

    @property
    def location(self) -> str:
        return self.url


class LocalFileRequest(BaseModel):
    """Where to get bytes from on the local filesystem."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: Path

    @property
    def location(self) -> str:
        return str(self.path)


type RequestDescriptor = RemoteRequest | LocalFileRequest


class RemoteSourceConfig(BaseModel):
    """Remote pet endpoint (stored in config.yaml).

    When ``resource`` is omitted the category name is used as the resource path.
    """

    model_config = ConfigDict(extra="forbid")

    type: Literal["remote"] = "remote"
    host: HostUrl
    resource: ResourcePath | None = None


class LocalSourceConfig(BaseModel):
    """Local JSON file (stored in config.yaml)."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["local"] = "local"
    path: Path


SourceConfig = Annotated[RemoteSourceConfig | LocalSourceConfig, Field(discriminator="type")]


__all__ = [
    "LocalFileRequest",
    "LocalSourceConfig",
    "RemoteRequest",
    "RemoteSourceConfig",
    "RequestDescriptor",
    "SourceConfig",
]
