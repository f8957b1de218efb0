"""Request sources: where a fetch gets its raw bytes from."""

from .local import LocalFileRequestSource
from .models import (
    LocalFileRequest,
    LocalSourceConfig,
    RemoteRequest,
    RemoteSourceConfig,
    RequestDescriptor,
    SourceConfig,
)
from .protocol import Locatable, RequestSource
from .remote import RemoteRequestSource

__all__ = [
    "LocalFileRequest",
    "LocalFileRequestSource",
    "LocalSourceConfig",
    "Locatable",
    "RemoteRequest",
    "RemoteRequestSource",
    "RemoteSourceConfig",
    "RequestDescriptor",
    "RequestSource",
    "SourceConfig",
]
