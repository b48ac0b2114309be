"""Key-value backed repository implementations."""

from breakloop.persistence.repository.conversation import (
    KeyValueConversationRepository,
    KeyValueLegacyChatRepository,
)
from breakloop.persistence.repository.event_chat import KeyValueEventChatRepository
from breakloop.persistence.repository.event_update import (
    KeyValueEventUpdateRepository,
)
from breakloop.persistence.repository.friend_request import (
    KeyValueFriendRequestRepository,
)
from breakloop.persistence.repository.invite import KeyValueInviteRepository

__all__ = [
    "KeyValueConversationRepository",
    "KeyValueEventChatRepository",
    "KeyValueEventUpdateRepository",
    "KeyValueFriendRequestRepository",
    "KeyValueInviteRepository",
    "KeyValueLegacyChatRepository",
]
