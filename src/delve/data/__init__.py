"""Storage backends for persisted session state."""

from .errors import DataError, DataLoadError
from .stores import InMemoryStore, JsonFileStore, KeyValueStore

__all__ = [
    "DataError",
    "DataLoadError",
    "InMemoryStore",
    "JsonFileStore",
    "KeyValueStore",
]
