"""Post event chat message use case."""

from pydantic import BaseModel, Field

from breakloop.application.usecase.base import BaseUseCase
from breakloop.application.usecase.event_chat.get_event_messages import (
    EventChatMessageItem,
)
from breakloop.domain.service import EventChatService, EventUpdateService
from breakloop.domain.value import UserId


class PostEventMessageRequest(BaseModel):
    """Post event message request."""

    event_id: str
    sender_id: str
    sender_name: str
    text: str = Field(min_length=1, max_length=5000)


class PostEventMessageResponse(BaseModel):
    """Post event message response."""

    event_id: str
    message: EventChatMessageItem
    message_count: int


class PostEventMessageUseCase(BaseUseCase):
    """Use case for posting to an event's group chat.

    The message is appended first, then an event chat update is emitted for
    the inbox.
    """

    def __init__(
        self,
        event_chat_service: EventChatService,
        event_update_service: EventUpdateService,
    ) -> None:
        """Initialize post event message use case.

        Args:
            event_chat_service: Event chat domain service
            event_update_service: Event update bus
        """
        self.event_chat_service = event_chat_service
        self.event_update_service = event_update_service

    async def execute(
        self, request: PostEventMessageRequest
    ) -> PostEventMessageResponse:
        """Append the message and notify the inbox.

        Args:
            request: Event, sender and message text

        Returns:
            The stored message and the chat size
        """
        sender_id = UserId(request.sender_id)
        messages = await self.event_chat_service.add_event_message(
            request.event_id, sender_id, request.sender_name, request.text
        )
        await self.event_update_service.emit_event_chat_update(
            request.event_id, sender_id, request.sender_name, request.text
        )

        message = messages[-1]
        return PostEventMessageResponse(
            event_id=request.event_id,
            message=EventChatMessageItem.from_domain(
                message, self.event_chat_service.format_message_time(message.created_at)
            ),
            message_count=len(messages),
        )
