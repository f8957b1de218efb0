"""Request source protocol."""

from __future__ import annotations

from typing import Protocol


class RequestSource[D](Protocol):
    """Produces a description of where to get raw bytes from.

    Implementations are pure: the same configuration yields an equal
    descriptor on every call, and nothing is remembered between calls.
    """

    def make_request(self) -> D: ...


class Locatable(Protocol):
    """A request descriptor that can name the place it points at."""

    @property
    def location(self) -> str: ...
