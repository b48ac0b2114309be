"""Base class for repositories backed by one key-value record.

A collection is read whole, modified in memory and written whole. Storage
faults never escape: a failed or corrupt read degrades to an empty
collection and a failed write is dropped, both with a warning. An update
whose read failed is not written at all.
"""

from collections.abc import Callable
from typing import Generic, TypeVar

import logfire
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from breakloop.persistence.store import KeyValueStore, StorageError

C = TypeVar("C")
R = TypeVar("R")


class KeyValueCollection(Generic[C]):
    """Collection of records stored as one JSON document."""

    def __init__(
        self,
        store: KeyValueStore,
        key: str,
        adapter: TypeAdapter[C],
        empty: Callable[[], C],
    ) -> None:
        """Initialize collection.

        Args:
            store: Key-value store holding the collection
            key: Key of the collection record
            adapter: Pydantic adapter for the collection shape
            empty: Factory for an empty collection
        """
        self.store = store
        self.key = key
        self._adapter = adapter
        self._empty = empty

    async def _load(self) -> C:
        """Read and parse the collection.

        A missing or unparseable record loads as empty, so the next write
        replaces it.

        Raises:
            StorageError: If the store cannot be read
        """
        raw = await self.store.get(self.key)
        if raw is None:
            return self._empty()

        try:
            return self._adapter.validate_json(raw)
        except ValidationError as e:
            logfire.warn(
                "Discarding unreadable collection",
                key=self.key,
                error_count=e.error_count(),
            )
            return self._empty()

    async def _read(self) -> C:
        try:
            return await self._load()
        except StorageError as e:
            logfire.warn("Failed to load collection", key=self.key, error=str(e))
            return self._empty()

    async def _write(self, records: C) -> bool:
        try:
            payload = self._adapter.dump_json(records)
            await self.store.put(self.key, payload)
        except (StorageError, PydanticSerializationError) as e:
            logfire.warn("Failed to save collection", key=self.key, error=str(e))
            return False
        return True

    async def _modify(self, change: Callable[[C], tuple[C | None, R]]) -> R:
        """Run one read-modify-write cycle under the collection lock.

        ``change`` returns the new collection (None to skip the write) and
        the value to hand back to the caller. When the store cannot be read
        the change runs against an empty collection and nothing is written,
        so the stored records survive the fault.
        """
        async with self.store.lock(self.key):
            try:
                records = await self._load()
                readable = True
            except StorageError as e:
                logfire.warn(
                    "Failed to load collection, write skipped",
                    key=self.key,
                    error=str(e),
                )
                records = self._empty()
                readable = False

            updated, result = change(records)
            if updated is not None and readable:
                await self._write(updated)
            return result
