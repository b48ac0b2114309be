"""Get event chat messages use case."""

from datetime import datetime

from pydantic import BaseModel

from breakloop.application.usecase.base import BaseUseCase
from breakloop.domain.model import EventChatMessage
from breakloop.domain.service import EventChatService


class EventChatMessageItem(BaseModel):
    """Event chat message in response."""

    message_id: str
    sender_id: str
    sender_name: str
    text: str
    created_at: datetime
    relative_time: str

    @classmethod
    def from_domain(
        cls, message: EventChatMessage, relative_time: str
    ) -> "EventChatMessageItem":
        return cls(
            message_id=message.id,
            sender_id=message.sender_id,
            sender_name=message.sender_name,
            text=message.text,
            created_at=message.created_at,
            relative_time=relative_time,
        )


class GetEventMessagesRequest(BaseModel):
    """Get event messages request."""

    event_id: str


class GetEventMessagesResponse(BaseModel):
    """Get event messages response."""

    event_id: str
    messages: list[EventChatMessageItem]


class GetEventMessagesUseCase(BaseUseCase):
    """Use case for reading an event's group chat."""

    def __init__(self, event_chat_service: EventChatService) -> None:
        self.event_chat_service = event_chat_service

    async def execute(
        self, request: GetEventMessagesRequest
    ) -> GetEventMessagesResponse:
        messages = await self.event_chat_service.get_event_messages(request.event_id)
        return GetEventMessagesResponse(
            event_id=request.event_id,
            messages=[
                EventChatMessageItem.from_domain(
                    message,
                    self.event_chat_service.format_message_time(message.created_at),
                )
                for message in messages
            ],
        )
