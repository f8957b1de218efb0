"""Persister backed by a preference store."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter
from pydantic.errors import PydanticSchemaGenerationError
from pydantic_core import PydanticSerializationError
from result import Err, Ok

from pawfetch.common import create_logger
from pawfetch.datastore import PreferenceStore

from .models import PersistError
from .protocol import SaveCompletion

logger = create_logger("persistence.preferences")


class PreferencesPersister:
    def __init__(self, store: PreferenceStore) -> None:
        self._store = store

    def save[T](self, value: T, key: str, completion: SaveCompletion[T]) -> None:
        try:
            data = _adapter_for(type(value)).dump_python(value, mode="json")
        except (PydanticSchemaGenerationError, PydanticSerializationError) as exc:
            logger.warning("Value could not be serialized", key=key, error=str(exc))
            completion(Err(PersistError(key=key, message=f"Failed to serialize value: {exc}")))
            return

        completion(
            self._store.set(key, data)
            .map(lambda _: value)
            .map_err(lambda error: PersistError(key=key, message=f"Failed to save value: {error.message}"))
        )


@lru_cache(maxsize=64)
def _adapter_for(value_type: type[Any]) -> TypeAdapter[Any]:
    return TypeAdapter(value_type)
