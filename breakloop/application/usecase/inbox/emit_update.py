"""Emit event update use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from breakloop.application.usecase.base import BaseUseCase
from breakloop.domain.service import EventUpdateService
from breakloop.domain.value import FriendRequestId, UpdateType, UserId


class EmitUpdateRequest(BaseModel):
    """Emit update request.

    ``message`` is the chat text for ``event_chat`` and the change
    description for ``event_updated``; other types ignore it.
    """

    type: UpdateType
    event_id: str = Field(min_length=1)
    actor_id: str
    actor_name: str
    message: str | None = None


class EmitUpdateResponse(BaseModel):
    """Emit update response."""

    update_id: str
    type: UpdateType
    event_id: str
    message: str | None
    created_at: datetime


class EmitUpdateUseCase(BaseUseCase):
    """Use case for publishing an activity update onto the bus."""

    def __init__(self, event_update_service: EventUpdateService) -> None:
        self.event_update_service = event_update_service

    async def execute(self, request: EmitUpdateRequest) -> EmitUpdateResponse:
        """Emit through the helper matching ``request.type``.

        Args:
            request: Emit update request

        Returns:
            The appended update
        """
        service = self.event_update_service
        actor_id = UserId(request.actor_id)
        event_id = request.event_id
        name = request.actor_name

        match request.type:
            case UpdateType.EVENT_CHAT:
                log = await service.emit_event_chat_update(
                    event_id, actor_id, name, request.message or ""
                )
            case UpdateType.JOIN_REQUEST:
                log = await service.emit_join_request_update(event_id, actor_id, name)
            case UpdateType.JOIN_APPROVED:
                log = await service.emit_join_approved_update(event_id, actor_id, name)
            case UpdateType.JOIN_DECLINED:
                log = await service.emit_join_declined_update(event_id, actor_id, name)
            case UpdateType.EVENT_UPDATED:
                log = await service.emit_event_updated_update(
                    event_id, actor_id, name, request.message
                )
            case UpdateType.EVENT_CANCELLED:
                log = await service.emit_event_cancelled_update(
                    event_id, actor_id, name
                )
            case UpdateType.PARTICIPANT_LEFT:
                log = await service.emit_participant_left_update(
                    event_id, actor_id, name
                )
            case UpdateType.FRIEND_REQUEST:
                log = await service.emit_friend_request_update(
                    FriendRequestId(event_id), actor_id, name
                )

        update = log[-1]
        return EmitUpdateResponse(
            update_id=update.id,
            type=update.type,
            event_id=update.event_id,
            message=update.message,
            created_at=update.created_at,
        )
