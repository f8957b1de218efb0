"""Remote HTTP request source."""

from __future__ import annotations

from pydantic import TypeAdapter

from pawfetch.common import HostUrl, ResourcePath

from .models import RemoteRequest

_host_adapter: TypeAdapter[str] = TypeAdapter(HostUrl)
_resource_adapter: TypeAdapter[str] = TypeAdapter(ResourcePath)


class RemoteRequestSource:
    """Builds ``GET {host}/{resource}`` requests.

    The host and resource are validated here so that a malformed
    configuration fails when the source is built, not when a fetch runs.
    """

    def __init__(self, host: str, resource: str) -> None:
        self._host = _host_adapter.validate_python(host).rstrip("/")
        self._resource = _resource_adapter.validate_python(resource)

    @property
    def url(self) -> str:
        return f"{self._host}/{self._resource}"

    def make_request(self) -> RemoteRequest:
        return RemoteRequest(method="GET", url=self.url)

    def __repr__(self) -> str:
        return f"RemoteRequestSource(url={self.url!r})"
