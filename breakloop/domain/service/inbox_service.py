"""Inbox domain service.

Read and resolve layer over the event update log. The projection itself is
a pure function of ``(log, now)``; the service only loads the log and
flips ``resolved`` flags.
"""

from collections.abc import Sequence
from datetime import datetime, timedelta

import logfire

from breakloop.domain.model.event_update import EventUpdate, InboxProjection
from breakloop.domain.repository import EventUpdateRepository
from breakloop.domain.value import ResolutionTrigger, UpdateId, UpdateType
from breakloop.util.clock import Clock

from .base import Service

# Chat clears when the chat is opened, join requests only on a decision;
# everything else is informational and clears when its entity is viewed.
_RESOLUTION_TRIGGERS = {
    UpdateType.EVENT_CHAT: ResolutionTrigger.CONVERSATION_OPENED,
    UpdateType.JOIN_REQUEST: ResolutionTrigger.EXPLICIT_DECISION,
}


def resolution_trigger(update_type: UpdateType) -> ResolutionTrigger:
    """Return the user action that resolves updates of ``update_type``."""
    return _RESOLUTION_TRIGGERS.get(update_type, ResolutionTrigger.ENTITY_VIEWED)


def project_inbox(log: Sequence[EventUpdate], now: datetime) -> InboxProjection:
    """Project the update log into the inbox.

    Unresolved updates only, most recent first; updates with equal
    timestamps keep reverse insertion order.

    Args:
        log: Update log in append order
        now: Instant of the projection

    Returns:
        The inbox projection
    """
    unresolved = [
        (position, update)
        for position, update in enumerate(log)
        if not update.resolved
    ]
    unresolved.sort(key=lambda item: (item[1].created_at, item[0]), reverse=True)
    updates = [update for _, update in unresolved]
    return InboxProjection(updates=updates, count=len(updates), generated_at=now)


def format_relative_time(timestamp: datetime, now: datetime) -> str:
    """Render ``timestamp`` relative to ``now``.

    ``"Just now"`` under a minute, then ``"{n}m ago"``, ``"{n}h ago"`` and
    ``"{n}d ago"`` up to a week, after that a short date such as ``"Mar 5"``.
    """
    elapsed_ms = (now - timestamp) // timedelta(milliseconds=1)
    minutes = elapsed_ms // 60_000
    hours = elapsed_ms // 3_600_000
    days = elapsed_ms // 86_400_000

    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes}m ago"
    if hours < 24:
        return f"{hours}h ago"
    if days < 7:
        return f"{days}d ago"
    return f"{timestamp:%b} {timestamp.day}"


class InboxService(Service):
    """Domain service projecting and resolving inbox updates."""

    def __init__(
        self, event_update_repository: EventUpdateRepository, clock: Clock
    ) -> None:
        """Initialize inbox service.

        Args:
            event_update_repository: Event update log
            clock: Source of the current time
        """
        self.event_update_repository = event_update_repository
        self.clock = clock

    async def get_projection(self) -> InboxProjection:
        """Project the current log. Recomputed on every call."""
        log = await self.event_update_repository.find_all()
        return project_inbox(log, self.clock.now())

    async def get_unresolved_updates(self) -> list[EventUpdate]:
        return (await self.get_projection()).updates

    async def get_unresolved_count(self) -> int:
        """Badge count. Always derived from the log, never cached."""
        return (await self.get_projection()).count

    def format_relative_time(self, timestamp: datetime) -> str:
        """Render ``timestamp`` relative to a single read of the clock."""
        return format_relative_time(timestamp, self.clock.now())

    async def resolve_update(self, update_id: UpdateId) -> int:
        """Resolve one update. Unknown or resolved ids are ignored.

        Returns:
            Number of updates newly resolved (0 or 1)
        """
        with logfire.span("inbox_service.resolve_update", update_id=update_id):
            return await self.event_update_repository.resolve_matching(
                lambda update: update.id == update_id
            )

    async def resolve_updates_by_event(self, event_id: str) -> int:
        """Resolve every update correlated with ``event_id``."""
        with logfire.span("inbox_service.resolve_updates_by_event", event_id=event_id):
            resolved = await self.event_update_repository.resolve_matching(
                lambda update: update.event_id == event_id
            )
            logfire.info("Updates resolved", event_id=event_id, count=resolved)
            return resolved

    async def resolve_updates_by_event_and_type(
        self, event_id: str, update_type: UpdateType
    ) -> int:
        """Resolve updates correlated with ``event_id`` of one type."""
        with logfire.span(
            "inbox_service.resolve_updates_by_event_and_type",
            event_id=event_id,
            type=update_type.value,
        ):
            return await self.event_update_repository.resolve_matching(
                lambda update: update.event_id == event_id
                and update.type == update_type
            )

    async def on_chat_opened(self, event_id: str) -> int:
        """The user opened the chat of ``event_id``."""
        return await self.resolve_updates_by_event_and_type(
            event_id, UpdateType.EVENT_CHAT
        )

    async def on_join_request_decided(self, event_id: str) -> int:
        """The host accepted or declined a join request for ``event_id``."""
        return await self.resolve_updates_by_event_and_type(
            event_id, UpdateType.JOIN_REQUEST
        )

    async def on_entity_viewed(self, event_id: str) -> int:
        """The user opened the entity behind ``event_id``.

        Only informational updates clear; chat and join requests stay.
        """
        with logfire.span("inbox_service.on_entity_viewed", event_id=event_id):
            return await self.event_update_repository.resolve_matching(
                lambda update: update.event_id == event_id
                and resolution_trigger(update.type) == ResolutionTrigger.ENTITY_VIEWED
            )
