"""Private conversation entities."""

from datetime import datetime

from pydantic import Field

from breakloop.domain.model.common import DomainModel
from breakloop.domain.value import ConversationId, MessageId, UserId


class PrivateMessage(DomainModel):
    """A message inside a private conversation. Immutable once appended."""

    id: MessageId
    conversation_id: ConversationId
    sender_id: UserId
    sender_name: str
    text: str
    created_at: datetime


class PrivateConversation(DomainModel):
    """Conversation between exactly two users.

    The id is derived from the sorted participant pair, so both users
    reach the same conversation. Messages are kept in append order, which
    is also chronological order.
    """

    id: ConversationId
    participant_ids: tuple[UserId, UserId]
    messages: list[PrivateMessage] = Field(default_factory=list)
    created_at: datetime
    last_message_at: datetime | None = None
    last_read_at: datetime | None = None

    @property
    def last_message(self) -> PrivateMessage | None:
        return self.messages[-1] if self.messages else None


class LegacyChatMessage(DomainModel):
    """Message in the legacy per-friend chat format.

    ``sender`` is ``"me"`` for the local user; any other value means the
    friend. The legacy format carries no timestamps or names.
    """

    id: str | None = None
    sender: str
    text: str
