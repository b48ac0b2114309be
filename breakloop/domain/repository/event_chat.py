"""Event group chat repository interface."""

from abc import ABC, abstractmethod

from breakloop.domain.model.event_chat import EventChatMessage


class EventChatRepository(ABC):
    """Repository for event group chats, one message list per event."""

    @abstractmethod
    async def find_by_event(self, event_id: str) -> list[EventChatMessage]:
        """Return the event's messages in append order, empty if none."""
        pass

    @abstractmethod
    async def append(
        self, event_id: str, message: EventChatMessage
    ) -> list[EventChatMessage]:
        """Append a message to the event's chat.

        Returns:
            The event's messages including the new one
        """
        pass
