"""Domain value objects for Breakloop."""

from breakloop.domain.value.identifiers import (
    ConversationId,
    FriendRequestId,
    InviteId,
    MessageId,
    UpdateId,
    UserId,
)
from breakloop.domain.value.types import (
    FriendEntry,
    FriendRequestStatus,
    IneligibilityReason,
    InviteRejection,
    InviteStatus,
    InviteToken,
    ResolutionTrigger,
    UpdateType,
)

__all__ = [
    # Identifiers
    "UserId",
    "InviteId",
    "FriendRequestId",
    "UpdateId",
    "ConversationId",
    "MessageId",
    # Types
    "FriendEntry",
    "FriendRequestStatus",
    "IneligibilityReason",
    "InviteRejection",
    "InviteStatus",
    "InviteToken",
    "ResolutionTrigger",
    "UpdateType",
]
