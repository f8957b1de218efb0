"""Transports: perform the transfer behind a request descriptor."""

from .file import FileTransport
from .http import HttpTransport
from .protocol import Transport

__all__ = ["FileTransport", "HttpTransport", "Transport"]
