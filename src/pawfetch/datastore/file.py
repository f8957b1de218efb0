"""File-based preference store."""

from __future__ import annotations

import json
from pathlib import Path

from result import Err, Ok, Result, is_err

from pawfetch.common import AppDirectories, JsonValue, create_logger, get_preferences_file

from .models import PreferenceKeyNotFoundError, PreferenceReadError, PreferenceStoreError, PreferenceWriteError

logger = create_logger("datastore.file")


class FilePreferenceStore:
    """Keeps every preference of a namespace in one JSON object on disk."""

    def __init__(self, namespace: str, directories: AppDirectories) -> None:
        self._namespace = namespace
        self._directories = directories

    @property
    def path(self) -> Path:
        return get_preferences_file(self._directories, self._namespace)

    def set(self, key: str, value: JsonValue) -> Result[None, PreferenceStoreError]:
        preferences = self._read()
        if is_err(preferences):
            return Err(PreferenceWriteError(namespace=self._namespace, message=preferences.err_value.message))

        entries = preferences.ok_value
        entries[key] = value
        return self._write(entries).inspect(lambda _: logger.debug("Preference saved", key=key))

    def get(self, key: str) -> Result[JsonValue, PreferenceStoreError]:
        return self._read().and_then(lambda entries: self._lookup(entries, key))

    def remove(self, key: str) -> Result[None, PreferenceStoreError]:
        preferences = self._read()
        if is_err(preferences):
            return Err(PreferenceWriteError(namespace=self._namespace, message=preferences.err_value.message))

        entries = preferences.ok_value
        if key not in entries:
            return Ok(None)
        del entries[key]
        return self._write(entries)

    def _lookup(self, entries: dict[str, JsonValue], key: str) -> Result[JsonValue, PreferenceStoreError]:
        if key not in entries:
            return Err(
                PreferenceKeyNotFoundError(
                    namespace=self._namespace,
                    key=key,
                    message=f"Key '{key}' not found in namespace '{self._namespace}'",
                )
            )
        return Ok(entries[key])

    def _read(self) -> Result[dict[str, JsonValue], PreferenceStoreError]:
        path = self.path
        if not path.exists():
            return Ok({})

        try:
            entries = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
            return Err(PreferenceReadError(namespace=self._namespace, message=f"Failed to read preferences: {e}"))

        if not isinstance(entries, dict):
            return Err(
                PreferenceReadError(namespace=self._namespace, message="Stored preferences must be a JSON object")
            )
        return Ok(entries)

    def _write(self, entries: dict[str, JsonValue]) -> Result[None, PreferenceStoreError]:
        path = self.path
        try:
            payload = json.dumps(entries, indent=2)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(payload, encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            return Err(PreferenceWriteError(namespace=self._namespace, message=f"Failed to write preferences: {e}"))
        return Ok(None)
