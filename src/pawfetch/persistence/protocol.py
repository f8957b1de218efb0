"""Persister protocol."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from result import Result

from .models import PersistError

type SaveCompletion[T] = Callable[[Result[T, PersistError]], None]


class Persister(Protocol):
    """Saves a value under a key and reports the outcome through ``completion``."""

    def save[T](self, value: T, key: str, completion: SaveCompletion[T]) -> None: ...
