"""Payload decoder protocol."""

from __future__ import annotations

from typing import Protocol

from result import Result

from .models import DecodingError


class PayloadDecoder(Protocol):
    """Converts raw bytes into a value of the requested type.

    Failures are reported as ``Err(DecodingError)``; nothing is raised.
    """

    def decode[T](self, payload: bytes, target: type[T]) -> Result[T, DecodingError]: ...
