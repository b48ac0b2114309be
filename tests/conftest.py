"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import logfire

from breakloop.domain.model import EventUpdate
from breakloop.domain.value import UpdateId, UpdateType, UserId

# Spans and logs stay local during tests
logfire.configure(send_to_logfire=False, console=False)

NOW = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


def make_update(
    update_id: str,
    minutes_ago: float = 0,
    type: UpdateType = UpdateType.EVENT_CHAT,
    event_id: str = "evt_1",
    resolved: bool = False,
) -> EventUpdate:
    """Build an event update relative to ``NOW``."""
    return EventUpdate(
        id=UpdateId(update_id),
        type=type,
        event_id=event_id,
        actor_id=UserId("bob"),
        actor_name="Bob",
        created_at=NOW - timedelta(minutes=minutes_ago),
        resolved=resolved,
    )
