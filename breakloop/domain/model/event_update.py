"""Event update entity.

An event update is one fact on the append-only notification log. Its
``event_id`` is an opaque correlation key: an activity id for the
activity-scoped types, a friend request id for ``friend_request``.
"""

from datetime import datetime

from breakloop.domain.model.common import DomainModel
from breakloop.domain.value import UpdateId, UpdateType, UserId


class EventUpdate(DomainModel):
    """Notification fact.

    ``resolved`` only ever goes from False to True.
    """

    id: UpdateId
    type: UpdateType
    event_id: str
    actor_id: UserId | None = None
    actor_name: str | None = None
    message: str | None = None
    created_at: datetime
    resolved: bool = False


class InboxProjection(DomainModel):
    """Read-side view of the update log at one instant.

    ``updates`` holds the unresolved updates, most recent first, and
    ``count`` is always ``len(updates)``.
    """

    updates: list[EventUpdate]
    count: int
    generated_at: datetime
