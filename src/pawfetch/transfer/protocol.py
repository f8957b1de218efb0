"""Transfer protocol."""

from __future__ import annotations

from typing import Protocol


class Transport[D](Protocol):
    """Performs the transfer a request descriptor points at.

    Returns the payload bytes, or ``None`` when nothing could be retrieved.
    """

    def transfer(self, request: D) -> bytes | None: ...
