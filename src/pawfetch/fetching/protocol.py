"""Fetcher protocol."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from result import Result

from .models import FetchError

type FetchCompletion[T] = Callable[[Result[T, FetchError]], None]


class Fetcher(Protocol):
    """Fetches a value of the requested type and reports it through ``completion``.

    ``completion`` is called exactly once per ``fetch`` call, either with the
    decoded value or with a ``DataNotFoundError``/``DecodingError``.
    """

    def fetch[T](self, target: type[T], completion: FetchCompletion[T]) -> None: ...
