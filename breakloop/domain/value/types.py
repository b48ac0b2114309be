"""Domain value objects for Breakloop.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from breakloop.domain.value.common import RootValueObject, ValueObject


class InviteStatus(str, Enum):
    """Status of an invite.

    ``used`` and ``expired`` are terminal.
    """

    ACTIVE = "active"
    USED = "used"
    EXPIRED = "expired"

    @property
    def is_terminal(self) -> bool:
        return self is not InviteStatus.ACTIVE


class FriendRequestStatus(str, Enum):
    """Status of a friend request.

    ``accepted`` and ``declined`` are terminal.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"


class UpdateType(str, Enum):
    """Kinds of notification carried on the event update bus."""

    EVENT_CHAT = "event_chat"
    JOIN_REQUEST = "join_request"
    JOIN_APPROVED = "join_approved"
    JOIN_DECLINED = "join_declined"
    EVENT_UPDATED = "event_updated"
    EVENT_CANCELLED = "event_cancelled"
    PARTICIPANT_LEFT = "participant_left"
    FRIEND_REQUEST = "friend_request"


class ResolutionTrigger(str, Enum):
    """User action that resolves an inbox update.

    Updates awaiting a decision must not auto-clear on view; purely
    informational ones may.
    """

    CONVERSATION_OPENED = "conversation_opened"
    EXPLICIT_DECISION = "explicit_decision"
    ENTITY_VIEWED = "entity_viewed"


class InviteRejection(str, Enum):
    """Reason an invite token cannot be redeemed."""

    NO_TOKEN = "no token"
    NOT_FOUND = "not found"
    ALREADY_USED = "already used"
    EXPIRED = "expired"
    OWN_INVITE = "own invite"

    @property
    def message(self) -> str:
        """Human-readable explanation shown to the invitee."""
        return _INVITE_REJECTION_MESSAGES[self]


_INVITE_REJECTION_MESSAGES = {
    InviteRejection.NO_TOKEN: "No invite token provided",
    InviteRejection.NOT_FOUND: "Invite not found",
    InviteRejection.ALREADY_USED: "This invite is no longer valid",
    InviteRejection.EXPIRED: "This invite has expired",
    InviteRejection.OWN_INVITE: "You can't use your own invite link",
}


class IneligibilityReason(str, Enum):
    """Reason a friend request may not be sent."""

    SELF = "self"
    ALREADY_FRIENDS = "already friends"
    REQUEST_PENDING = "request pending"
    UNAVAILABLE = "unavailable"


class InviteToken(RootValueObject[str]):
    """Shareable single-use invite token.

    URL-safe, 1-255 characters. Generated tokens are lowercase alphanumeric.
    """

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is URL-safe and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        if not re.match(r"^[A-Za-z0-9_-]+$", v):
            raise ValueError("Token must be URL-safe")
        return v


class FriendEntry(ValueObject):
    """Entry of the externally supplied friend list.

    The friend graph is owned outside this service; only ``id`` and
    ``status`` are consulted.
    """

    id: str
    name: str | None = None
    status: str = FriendRequestStatus.PENDING.value
