from __future__ import annotations

import gc
from dataclasses import fields

from result import Err, Ok, Result, is_err, is_ok

from pawfetch.fetching import DataNotFoundError, FetchError
from pawfetch.persistence import PersistError
from pawfetch.pets import CATS, DOGS, PetsServiceImpl, PetViewData
from pawfetch.pets.models import Cat, Dog, Size

PERSIAN = Cat(
    identifier="c1",
    breed="Persian",
    size=Size(height_in_centimeters=30, weight_in_kilograms=5, description="Medium"),
)


class StubFetcher:
    def __init__(self, result: Result[object, FetchError]) -> None:
        self.result = result
        self.targets: list[object] = []

    def fetch(self, target: type, completion) -> None:
        self.targets.append(target)
        completion(self.result)


class DeferredFetcher:
    """Holds on to the completion until the test releases it."""

    def __init__(self) -> None:
        self.completions: list = []

    def fetch(self, target: type, completion) -> None:
        self.completions.append(completion)


class RecordingPersister:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.saved: list[tuple[object, str]] = []

    def save(self, value, key: str, completion) -> None:
        self.saved.append((value, key))
        if self.fail:
            completion(Err(PersistError(key=key, message="disk full")))
        else:
            completion(Ok(value))


class Recorder:
    def __init__(self) -> None:
        self.results: list[Result[list[PetViewData], FetchError]] = []

    def __call__(self, result: Result[list[PetViewData], FetchError]) -> None:
        self.results.append(result)


def test_get_pets_requests_list_of_record_type() -> None:
    fetcher = StubFetcher(Ok([]))

    PetsServiceImpl(fetcher, RecordingPersister(), CATS).get_pets(Recorder())

    assert fetcher.targets == [list[Cat]]


def test_get_pets_maps_records_to_view_data() -> None:
    recorder = Recorder()
    service = PetsServiceImpl(StubFetcher(Ok([PERSIAN])), RecordingPersister(), CATS)

    service.get_pets(recorder)

    assert len(recorder.results) == 1
    result = recorder.results[0]
    assert is_ok(result)
    [pet] = result.ok_value
    assert pet.breed == "Persian"
    assert pet.details == "Medium"
    assert pet.label() == "Persian (Medium)"


def test_view_data_exposes_no_identifier() -> None:
    assert [field.name for field in fields(PetViewData)] == ["breed", "details", "did_select"]


def test_get_pets_forwards_fetch_error() -> None:
    recorder = Recorder()
    error = DataNotFoundError(location="https://example.com/cats")
    service = PetsServiceImpl(StubFetcher(Err(error)), RecordingPersister(), CATS)

    service.get_pets(recorder)

    assert recorder.results == [Err(error)]


def test_did_select_saves_record_under_favorite_key() -> None:
    recorder = Recorder()
    persister = RecordingPersister()
    service = PetsServiceImpl(StubFetcher(Ok([PERSIAN])), persister, CATS)
    service.get_pets(recorder)

    recorder.results[0].ok_value[0].did_select()

    assert persister.saved == [(PERSIAN, "favorite-cats-c1")]


def test_did_select_tolerates_save_failure() -> None:
    recorder = Recorder()
    persister = RecordingPersister(fail=True)
    service = PetsServiceImpl(StubFetcher(Ok([Dog(id=3, breed="Husky")])), persister, DOGS)
    service.get_pets(recorder)

    recorder.results[0].ok_value[0].did_select()

    assert persister.saved == [(Dog(id=3, breed="Husky"), "favorite-dogs-3")]


def test_late_fetch_result_is_dropped_after_service_released() -> None:
    recorder = Recorder()
    fetcher = DeferredFetcher()
    service = PetsServiceImpl(fetcher, RecordingPersister(), CATS)
    service.get_pets(recorder)

    del service
    gc.collect()
    fetcher.completions[0](Ok([PERSIAN]))

    assert recorder.results == []


def test_selection_is_noop_after_service_released() -> None:
    recorder = Recorder()
    persister = RecordingPersister()
    service = PetsServiceImpl(StubFetcher(Ok([PERSIAN])), persister, CATS)
    service.get_pets(recorder)
    pet = recorder.results[0].ok_value[0]

    del service
    gc.collect()
    pet.did_select()

    assert persister.saved == []


def test_pending_fetch_completes_while_service_alive() -> None:
    recorder = Recorder()
    fetcher = DeferredFetcher()
    service = PetsServiceImpl(fetcher, RecordingPersister(), CATS)
    service.get_pets(recorder)

    fetcher.completions[0](Err(DataNotFoundError(location="cats.json")))

    assert len(recorder.results) == 1
    assert is_err(recorder.results[0])
    assert service is not None
