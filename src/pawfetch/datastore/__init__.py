"""pawfetch preference store module."""

from .file import FilePreferenceStore
from .models import PreferenceKeyNotFoundError, PreferenceReadError, PreferenceStoreError, PreferenceWriteError
from .protocol import PreferenceStore

__all__ = [
    "FilePreferenceStore",
    "PreferenceKeyNotFoundError",
    "PreferenceReadError",
    "PreferenceStore",
    "PreferenceStoreError",
    "PreferenceWriteError",
]
