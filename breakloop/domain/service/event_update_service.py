"""Event update bus.

Append-only log of notification facts. Nothing here knows about current
state; the inbox service projects the log into what the user sees.
"""

import logfire

from breakloop.config import InboxSettings
from breakloop.domain.model.event_update import EventUpdate
from breakloop.domain.repository import EventUpdateRepository
from breakloop.domain.value import FriendRequestId, UpdateId, UpdateType, UserId
from breakloop.util.clock import Clock
from breakloop.util.tokens import generate_id

from .base import Service


def preview(text: str, length: int = 50) -> str:
    """Cut ``text`` to ``length`` characters, appending an ellipsis if cut."""
    return text[:length] + "..." if len(text) > length else text


class EventUpdateService(Service):
    """Domain service emitting updates onto the log."""

    def __init__(
        self,
        event_update_repository: EventUpdateRepository,
        clock: Clock,
        inbox_settings: InboxSettings,
    ) -> None:
        """Initialize event update service.

        Args:
            event_update_repository: Event update log
            clock: Source of the current time
            inbox_settings: Inbox configuration
        """
        self.event_update_repository = event_update_repository
        self.clock = clock
        self.settings = inbox_settings

    def create_event_update(
        self,
        type: UpdateType,
        event_id: str,
        actor_id: UserId | None = None,
        actor_name: str | None = None,
        message: str | None = None,
    ) -> EventUpdate:
        """Build an unresolved update. Does not persist it."""
        now = self.clock.now()
        return EventUpdate(
            id=UpdateId(generate_id("upd", now)),
            type=type,
            event_id=event_id,
            actor_id=actor_id,
            actor_name=actor_name,
            message=message,
            created_at=now,
            resolved=False,
        )

    async def add_event_update(self, update: EventUpdate) -> list[EventUpdate]:
        """Append an update to the log.

        Args:
            update: Update to append

        Returns:
            The full log after the append
        """
        with logfire.span(
            "event_update_service.add_event_update",
            type=update.type.value,
            event_id=update.event_id,
        ):
            log = await self.event_update_repository.append(update)
            logfire.info(
                "Event update emitted",
                update_id=update.id,
                type=update.type.value,
                event_id=update.event_id,
                actor=update.actor_name or update.actor_id,
                message=update.message,
                created_at=update.created_at.isoformat(),
            )
            return log

    async def emit_event_chat_update(
        self, event_id: str, sender_id: UserId, sender_name: str, message_text: str
    ) -> list[EventUpdate]:
        """Emit an event chat message update carrying a short preview."""
        return await self.add_event_update(
            self.create_event_update(
                type=UpdateType.EVENT_CHAT,
                event_id=event_id,
                actor_id=sender_id,
                actor_name=sender_name,
                message=preview(message_text, self.settings.chat_preview_length),
            )
        )

    async def emit_join_request_update(
        self, event_id: str, requester_id: UserId, requester_name: str
    ) -> list[EventUpdate]:
        """Emit a join request update, addressed to the host."""
        return await self.add_event_update(
            self.create_event_update(
                type=UpdateType.JOIN_REQUEST,
                event_id=event_id,
                actor_id=requester_id,
                actor_name=requester_name,
            )
        )

    async def emit_join_approved_update(
        self, event_id: str, host_id: UserId, host_name: str
    ) -> list[EventUpdate]:
        return await self.add_event_update(
            self.create_event_update(
                type=UpdateType.JOIN_APPROVED,
                event_id=event_id,
                actor_id=host_id,
                actor_name=host_name,
            )
        )

    async def emit_join_declined_update(
        self, event_id: str, host_id: UserId, host_name: str
    ) -> list[EventUpdate]:
        return await self.add_event_update(
            self.create_event_update(
                type=UpdateType.JOIN_DECLINED,
                event_id=event_id,
                actor_id=host_id,
                actor_name=host_name,
            )
        )

    async def emit_event_updated_update(
        self,
        event_id: str,
        editor_id: UserId,
        editor_name: str,
        change_description: str | None = None,
    ) -> list[EventUpdate]:
        """Emit an event edited update with an optional change summary."""
        return await self.add_event_update(
            self.create_event_update(
                type=UpdateType.EVENT_UPDATED,
                event_id=event_id,
                actor_id=editor_id,
                actor_name=editor_name,
                message=change_description,
            )
        )

    async def emit_event_cancelled_update(
        self, event_id: str, host_id: UserId, host_name: str
    ) -> list[EventUpdate]:
        return await self.add_event_update(
            self.create_event_update(
                type=UpdateType.EVENT_CANCELLED,
                event_id=event_id,
                actor_id=host_id,
                actor_name=host_name,
            )
        )

    async def emit_participant_left_update(
        self, event_id: str, participant_id: UserId, participant_name: str
    ) -> list[EventUpdate]:
        return await self.add_event_update(
            self.create_event_update(
                type=UpdateType.PARTICIPANT_LEFT,
                event_id=event_id,
                actor_id=participant_id,
                actor_name=participant_name,
            )
        )

    async def emit_friend_request_update(
        self, request_id: FriendRequestId, from_user_id: UserId, from_user_name: str
    ) -> list[EventUpdate]:
        """Emit a friend request update keyed by the request id."""
        return await self.add_event_update(
            self.create_event_update(
                type=UpdateType.FRIEND_REQUEST,
                event_id=request_id,
                actor_id=from_user_id,
                actor_name=from_user_name,
                message=f"{from_user_name} wants to be friends",
            )
        )
