"""Key-value implementation of the event update log."""

from collections.abc import Callable

from pydantic import TypeAdapter

from breakloop.domain.model import EventUpdate
from breakloop.domain.repository import EventUpdateRepository
from breakloop.persistence.repository.base import KeyValueCollection
from breakloop.persistence.store import KeyValueStore


class KeyValueEventUpdateRepository(
    KeyValueCollection[list[EventUpdate]], EventUpdateRepository
):
    """Event updates stored as one JSON array in append order."""

    def __init__(self, store: KeyValueStore, key: str) -> None:
        super().__init__(store, key, TypeAdapter(list[EventUpdate]), list)

    async def find_all(self) -> list[EventUpdate]:
        return await self._read()

    async def append(self, update: EventUpdate) -> list[EventUpdate]:
        def change(updates: list[EventUpdate]):
            log = [*updates, update]
            return log, log

        return await self._modify(change)

    async def resolve_matching(self, match: Callable[[EventUpdate], bool]) -> int:
        def change(updates: list[EventUpdate]):
            flipped = 0
            log = []
            for update in updates:
                if not update.resolved and match(update):
                    update = update.model_copy(update={"resolved": True})
                    flipped += 1
                log.append(update)
            # Nothing to flip means nothing to write
            return (log if flipped else None), flipped

        return await self._modify(change)
