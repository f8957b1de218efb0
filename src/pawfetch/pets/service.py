"""Pets service: turns fetched wire records into view data."""

from __future__ import annotations

import weakref
from collections.abc import Callable
from typing import Protocol

from result import Err, Ok, Result

from pawfetch.common import create_logger
from pawfetch.fetching import FetchError, Fetcher
from pawfetch.persistence import PersistError, Persister, favorite_key

from .catalog import PetCatalog
from .models import PetRecord
from .view_data import PetViewData

logger = create_logger("pets.service")

type PetsCompletion = Callable[[Result[list[PetViewData], FetchError]], None]


class PetsService(Protocol):
    """What the presentation layer depends on to load pets."""

    def get_pets(self, completion: PetsCompletion) -> None: ...


class PetsServiceImpl[R: PetRecord]:
    """Loads one category through a fetcher and saves favorites through a persister.

    Callbacks only hold weak references back to the service; once the service
    is released, late fetch results and selections are dropped.
    """

    def __init__(self, fetcher: Fetcher, persister: Persister, catalog: PetCatalog[R]) -> None:
        self._fetcher = fetcher
        self._persister = persister
        self._catalog = catalog

    def get_pets(self, completion: PetsCompletion) -> None:
        service_ref = weakref.ref(self)
        category = self._catalog.name

        def on_fetched(result: Result[list[R], FetchError]) -> None:
            service = service_ref()
            if service is None:
                logger.debug("Pets service released before fetch completed", category=category)
                return
            completion(result.map(service._to_view_data))

        self._fetcher.fetch(list[self._catalog.record_type], on_fetched)

    def _to_view_data(self, records: list[R]) -> list[PetViewData]:
        return [
            PetViewData(
                breed=record.breed,
                details=self._catalog.describe(record),
                did_select=self._selection(record),
            )
            for record in records
        ]

    def _selection(self, record: R) -> Callable[[], None]:
        service_ref = weakref.ref(self)

        def select() -> None:
            service = service_ref()
            if service is not None:
                service._save_favorite(record)

        return select

    def _save_favorite(self, record: R) -> None:
        key = favorite_key(self._catalog.name, self._catalog.identify(record))

        def on_saved(result: Result[R, PersistError]) -> None:
            match result:
                case Ok(_):
                    logger.info("Favorite saved", key=key)
                case Err(error):
                    logger.error("Favorite could not be saved", key=key, error=error.message)

        self._persister.save(record, key, on_saved)
