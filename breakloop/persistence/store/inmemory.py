"""In-memory key-value store for testing."""

from breakloop.persistence.store.base import KeyValueStore, StorageError


class InMemoryKeyValueStore(KeyValueStore):
    """In-memory implementation of KeyValueStore for testing.

    ``fail_reads`` / ``fail_writes`` simulate substrate faults.
    """

    def __init__(self) -> None:
        super().__init__()
        self._records: dict[str, bytes] = {}
        self.fail_reads = False
        self.fail_writes = False

    async def get(self, key: str) -> bytes | None:
        if self.fail_reads:
            raise StorageError(f"Simulated read failure for {key}")
        return self._records.get(key)

    async def put(self, key: str, value: bytes) -> None:
        if self.fail_writes:
            raise StorageError(f"Simulated write failure for {key}")
        self._records[key] = value

    def raw(self, key: str) -> bytes | None:
        """Return the stored bytes without going through the fault switches."""
        return self._records.get(key)

    def seed(self, key: str, value: bytes) -> None:
        """Store bytes directly, e.g. to plant a corrupt record."""
        self._records[key] = value
