"""Get inbox use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from breakloop.application.usecase.base import BaseUseCase
from breakloop.domain.model import EventUpdate
from breakloop.domain.service import InboxService, format_relative_time, resolution_trigger
from breakloop.domain.value import ResolutionTrigger, UpdateType


class InboxItem(BaseModel):
    """Inbox update in response."""

    update_id: str
    type: UpdateType
    event_id: str
    actor_id: str | None
    actor_name: str | None
    message: str | None
    created_at: datetime
    relative_time: str
    resolved_by: ResolutionTrigger

    @classmethod
    def from_domain(cls, update: EventUpdate, now: datetime) -> "InboxItem":
        return cls(
            update_id=update.id,
            type=update.type,
            event_id=update.event_id,
            actor_id=update.actor_id,
            actor_name=update.actor_name,
            message=update.message,
            created_at=update.created_at,
            relative_time=format_relative_time(update.created_at, now),
            resolved_by=resolution_trigger(update.type),
        )


class GetInboxRequest(BaseModel):
    """Get inbox request."""

    limit: int | None = Field(default=None, ge=1)


class GetInboxResponse(BaseModel):
    """Get inbox response.

    ``count`` is the full unresolved count even when ``updates`` is limited.
    """

    updates: list[InboxItem]
    count: int
    generated_at: datetime


class GetInboxUseCase(BaseUseCase):
    """Use case for reading the projected inbox."""

    def __init__(self, inbox_service: InboxService) -> None:
        """Initialize get inbox use case.

        Args:
            inbox_service: Inbox domain service
        """
        self.inbox_service = inbox_service

    async def execute(self, request: GetInboxRequest) -> GetInboxResponse:
        """Project the log and render relative times against one instant.

        Args:
            request: Get inbox request

        Returns:
            Unresolved updates, most recent first
        """
        projection = await self.inbox_service.get_projection()
        updates = projection.updates
        if request.limit is not None:
            updates = updates[: request.limit]

        return GetInboxResponse(
            updates=[
                InboxItem.from_domain(update, projection.generated_at)
                for update in updates
            ],
            count=projection.count,
            generated_at=projection.generated_at,
        )
