"""Fetchers: the fetch-and-decode boundary consumers depend on."""

from .fetcher import TransferFetcher, create_fetcher, local_file_fetcher, remote_fetcher
from .models import DataNotFoundError, DecodingError, FetchError
from .protocol import FetchCompletion, Fetcher

__all__ = [
    "DataNotFoundError",
    "DecodingError",
    "FetchCompletion",
    "FetchError",
    "Fetcher",
    "TransferFetcher",
    "create_fetcher",
    "local_file_fetcher",
    "remote_fetcher",
]
