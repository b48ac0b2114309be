"""Key-value storage port.

Every collection is one serialized record under a fixed key. The port has
exactly two data operations; per-key locks let collection repositories run
their read-modify-write cycles without interleaving inside one process.
"""

import asyncio
from abc import ABC, abstractmethod


class StorageError(Exception):
    """Raised by a store when the underlying substrate fails."""

    pass


class KeyValueStore(ABC):
    """Durable key -> bytes store."""

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}

    @abstractmethod
    async def get(self, key: str) -> bytes | None:
        """Read the record under ``key``.

        Returns:
            The stored bytes, or None if the key was never written

        Raises:
            StorageError: If the substrate cannot be read
        """
        pass

    @abstractmethod
    async def put(self, key: str, value: bytes) -> None:
        """Replace the record under ``key``.

        Raises:
            StorageError: If the substrate cannot be written
        """
        pass

    def lock(self, key: str) -> asyncio.Lock:
        """Return the lock serializing writers of ``key``."""
        if key not in self._locks:
            self._locks[key] = asyncio.Lock()
        return self._locks[key]
