"""Key-value store port and adapters."""

from breakloop.persistence.store.base import KeyValueStore, StorageError
from breakloop.persistence.store.inmemory import InMemoryKeyValueStore
from breakloop.persistence.store.sql import SqlKeyValueStore

__all__ = [
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "SqlKeyValueStore",
    "StorageError",
]
