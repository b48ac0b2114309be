"""Event group chat use cases."""

from breakloop.application.usecase.event_chat.get_event_messages import (
    EventChatMessageItem,
    GetEventMessagesRequest,
    GetEventMessagesResponse,
    GetEventMessagesUseCase,
)
from breakloop.application.usecase.event_chat.post_event_message import (
    PostEventMessageRequest,
    PostEventMessageResponse,
    PostEventMessageUseCase,
)

__all__ = [
    "EventChatMessageItem",
    "GetEventMessagesRequest",
    "GetEventMessagesResponse",
    "GetEventMessagesUseCase",
    "PostEventMessageRequest",
    "PostEventMessageResponse",
    "PostEventMessageUseCase",
]
