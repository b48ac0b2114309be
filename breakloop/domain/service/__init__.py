"""Domain services."""

from .base import Service
from .conversation_service import ConversationService, get_conversation_id
from .event_chat_service import EventChatService
from .event_update_service import EventUpdateService
from .friend_request_service import FriendRequestService
from .inbox_service import (
    InboxService,
    format_relative_time,
    project_inbox,
    resolution_trigger,
)
from .invite_service import InviteService

__all__ = [
    "ConversationService",
    "EventChatService",
    "EventUpdateService",
    "FriendRequestService",
    "InboxService",
    "InviteService",
    "Service",
    "format_relative_time",
    "get_conversation_id",
    "project_inbox",
    "resolution_trigger",
]
