"""Event group chat entities."""

from datetime import datetime

from breakloop.domain.model.common import DomainModel
from breakloop.domain.value import MessageId, UserId


class EventChatMessage(DomainModel):
    """A message in an event's group chat. Immutable once appended."""

    id: MessageId
    event_id: str
    sender_id: UserId
    sender_name: str
    text: str
    created_at: datetime
