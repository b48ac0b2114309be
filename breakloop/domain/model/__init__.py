"""Domain model entities for Breakloop."""

from breakloop.domain.model.conversation import (
    LegacyChatMessage,
    PrivateConversation,
    PrivateMessage,
)
from breakloop.domain.model.event_chat import EventChatMessage
from breakloop.domain.model.event_update import EventUpdate, InboxProjection
from breakloop.domain.model.friend_request import FriendRequest
from breakloop.domain.model.invite import Invite, InviteValidation

__all__ = [
    "Invite",
    "InviteValidation",
    "FriendRequest",
    "EventChatMessage",
    "EventUpdate",
    "InboxProjection",
    "PrivateConversation",
    "PrivateMessage",
    "LegacyChatMessage",
]
