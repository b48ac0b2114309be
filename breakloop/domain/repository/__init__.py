"""Repository interfaces for Breakloop domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from breakloop.domain.repository.conversation import (
    ConversationRepository,
    LegacyChatRepository,
)
from breakloop.domain.repository.event_chat import EventChatRepository
from breakloop.domain.repository.event_update import EventUpdateRepository
from breakloop.domain.repository.friend_request import FriendRequestRepository
from breakloop.domain.repository.invite import InviteRepository

__all__ = [
    "InviteRepository",
    "FriendRequestRepository",
    "EventChatRepository",
    "EventUpdateRepository",
    "ConversationRepository",
    "LegacyChatRepository",
]
