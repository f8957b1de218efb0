"""Transfer-backed fetcher."""

from __future__ import annotations

from concurrent.futures import Executor, Future
from pathlib import Path

import httpx
from result import Err, is_err

from pawfetch.common import create_logger
from pawfetch.decoding import PayloadDecoder
from pawfetch.sources import (
    Locatable,
    LocalFileRequestSource,
    LocalSourceConfig,
    RemoteRequestSource,
    RemoteSourceConfig,
    RequestSource,
)
from pawfetch.transfer import FileTransport, HttpTransport, Transport

from .models import DataNotFoundError
from .protocol import FetchCompletion

logger = create_logger("fetching")


class TransferFetcher[D: Locatable]:
    """Composes a request source, a transport and a decoder.

    The fetcher does not know which concrete source or transport it holds;
    every combination reports a missing payload as ``DataNotFoundError``.
    When an executor is given the work runs there and ``completion`` is
    invoked from the executor, otherwise everything happens inline.
    """

    def __init__(
        self,
        source: RequestSource[D],
        transport: Transport[D],
        decoder: PayloadDecoder,
        *,
        executor: Executor | None = None,
    ) -> None:
        self._source = source
        self._transport = transport
        self._decoder = decoder
        self._executor = executor

    def fetch[T](self, target: type[T], completion: FetchCompletion[T]) -> None:
        if self._executor is None:
            self._run(target, completion)
            return

        future = self._executor.submit(self._run, target, completion)
        future.add_done_callback(_log_unexpected_failure)

    def _run[T](self, target: type[T], completion: FetchCompletion[T]) -> None:
        request = self._source.make_request()
        payload = self._transport.transfer(request)

        if not payload:
            logger.info("No data found", location=request.location)
            completion(Err(DataNotFoundError(location=request.location)))
            return

        result = self._decoder.decode(payload, target)
        if is_err(result):
            logger.info("Payload could not be decoded", location=request.location, error=result.err_value.message)
        completion(result)


def remote_fetcher(
    host: str,
    resource: str,
    decoder: PayloadDecoder,
    client: httpx.Client,
    *,
    executor: Executor | None = None,
) -> TransferFetcher:
    """Fetcher for ``GET {host}/{resource}``."""
    return TransferFetcher(RemoteRequestSource(host, resource), HttpTransport(client), decoder, executor=executor)


def local_file_fetcher(
    file_name: str,
    decoder: PayloadDecoder,
    *,
    extension: str | None = "json",
    base_dir: Path | None = None,
    executor: Executor | None = None,
) -> TransferFetcher:
    """Fetcher for ``{base_dir}/{file_name}.{extension}``."""
    source = LocalFileRequestSource(file_name, extension=extension, base_dir=base_dir)
    return TransferFetcher(source, FileTransport(), decoder, executor=executor)


def create_fetcher(
    config: RemoteSourceConfig | LocalSourceConfig,
    decoder: PayloadDecoder,
    *,
    category: str,
    client: httpx.Client | None = None,
    executor: Executor | None = None,
) -> TransferFetcher:
    """Create the fetcher described by a source config entry.

    Remote configs need a ``client``; the caller opens and closes it, the
    fetcher only borrows it.
    """
    match config:
        case RemoteSourceConfig() if client is None:
            raise ValueError(f"Remote source for '{category}' needs an httpx.Client")
        case RemoteSourceConfig():
            return remote_fetcher(
                config.host,
                config.resource or category,
                decoder,
                client,
                executor=executor,
            )
        case LocalSourceConfig():
            path = config.path.expanduser()
            return local_file_fetcher(path.name, decoder, extension=None, base_dir=path.parent, executor=executor)


def _log_unexpected_failure(future: Future[None]) -> None:
    if future.cancelled():
        return
    exc = future.exception()
    if exc is not None:
        logger.opt(exception=exc).error("Fetch raised outside the result channel")
