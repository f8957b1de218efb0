"""HTTP transport built on httpx."""

from __future__ import annotations

import httpx

from pawfetch.common import create_logger
from pawfetch.sources.models import RemoteRequest

logger = create_logger("transfer.http")


class HttpTransport:
    """Sends a ``RemoteRequest`` through an injected ``httpx.Client``.

    The response status is not inspected; an empty body or a transport
    failure both mean there is no payload.
    """

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def transfer(self, request: RemoteRequest) -> bytes | None:
        logger.debug("Sending request", method=request.method, url=request.url)
        try:
            response = self._client.request(request.method, request.url)
        except httpx.HTTPError as exc:
            logger.warning("Request failed", url=request.url, error=str(exc))
            return None

        logger.debug("Response received", url=request.url, status=response.status_code, size=len(response.content))
        return response.content or None
