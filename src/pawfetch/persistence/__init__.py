"""Persisters: save values under keys."""

from .keys import favorite_key
from .models import PersistError
from .preferences import PreferencesPersister
from .protocol import Persister, SaveCompletion

__all__ = [
    "PersistError",
    "Persister",
    "PreferencesPersister",
    "SaveCompletion",
    "favorite_key",
]
