"""Event group chat domain service."""

from datetime import datetime

import logfire

from breakloop.domain.model.event_chat import EventChatMessage
from breakloop.domain.repository import EventChatRepository
from breakloop.domain.value import MessageId, UserId
from breakloop.util.clock import Clock
from breakloop.util.tokens import generate_id

from .base import Service
from .inbox_service import format_relative_time


class EventChatService(Service):
    """Domain service for chats scoped to a single event.

    Every event owns its own message list. Messages are appended in arrival
    order and never edited.
    """

    def __init__(self, event_chat_repository: EventChatRepository, clock: Clock) -> None:
        """Initialize event chat service.

        Args:
            event_chat_repository: Event chat repository
            clock: Source of the current time
        """
        self.event_chat_repository = event_chat_repository
        self.clock = clock

    def generate_message_id(self) -> MessageId:
        return MessageId(generate_id("msg", self.clock.now()))

    def format_message_time(self, timestamp: datetime) -> str:
        return format_relative_time(timestamp, self.clock.now())

    async def get_event_messages(self, event_id: str) -> list[EventChatMessage]:
        """Messages of an event in append order, empty for an unknown event."""
        return await self.event_chat_repository.find_by_event(event_id)

    async def add_event_message(
        self,
        event_id: str,
        sender_id: UserId,
        sender_name: str,
        text: str,
        created_at: datetime | None = None,
    ) -> list[EventChatMessage]:
        """Append a message to an event's chat.

        Args:
            event_id: Event owning the chat
            sender_id: Sender ID
            sender_name: Sender display name
            text: Message text
            created_at: Message time, defaults to now

        Returns:
            The event's messages including the new one
        """
        with logfire.span(
            "event_chat_service.add_event_message",
            event_id=event_id,
            sender_id=str(sender_id),
        ):
            message = EventChatMessage(
                id=self.generate_message_id(),
                event_id=event_id,
                sender_id=sender_id,
                sender_name=sender_name,
                text=text,
                created_at=created_at or self.clock.now(),
            )
            messages = await self.event_chat_repository.append(event_id, message)
            logfire.info(
                "Event chat message added",
                event_id=event_id,
                message_id=message.id,
                message_count=len(messages),
            )
            return messages
