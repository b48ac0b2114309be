"""Key-value implementation of the event chat repository."""

from pydantic import TypeAdapter

from breakloop.domain.model import EventChatMessage
from breakloop.domain.repository import EventChatRepository
from breakloop.persistence.repository.base import KeyValueCollection
from breakloop.persistence.store import KeyValueStore

EventChats = dict[str, list[EventChatMessage]]


class KeyValueEventChatRepository(KeyValueCollection[EventChats], EventChatRepository):
    """Event chats stored as one JSON object keyed by event id."""

    def __init__(self, store: KeyValueStore, key: str) -> None:
        super().__init__(store, key, TypeAdapter(EventChats), dict)

    async def find_by_event(self, event_id: str) -> list[EventChatMessage]:
        return (await self._read()).get(event_id, [])

    async def append(
        self, event_id: str, message: EventChatMessage
    ) -> list[EventChatMessage]:
        def change(chats: EventChats):
            messages = [*chats.get(event_id, []), message]
            return {**chats, event_id: messages}, messages

        return await self._modify(change)
