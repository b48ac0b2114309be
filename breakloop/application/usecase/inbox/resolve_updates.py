"""Resolve inbox updates use case."""

from pydantic import BaseModel, model_validator

from breakloop.application.usecase.base import BaseUseCase
from breakloop.domain.service import InboxService
from breakloop.domain.value import ResolutionTrigger, UpdateId, UpdateType


class ResolveUpdatesRequest(BaseModel):
    """Resolve updates request.

    Either a single ``update_id``, or an ``event_id`` optionally narrowed by
    ``type`` or by the ``trigger`` the user just performed.
    """

    update_id: str | None = None
    event_id: str | None = None
    type: UpdateType | None = None
    trigger: ResolutionTrigger | None = None

    @model_validator(mode="after")
    def validate_target(self) -> "ResolveUpdatesRequest":
        if (self.update_id is None) == (self.event_id is None):
            raise ValueError("Provide exactly one of update_id or event_id")
        if self.type is not None and self.trigger is not None:
            raise ValueError("Provide at most one of type or trigger")
        if self.update_id is not None and (self.type or self.trigger):
            raise ValueError("type and trigger only apply to event_id")
        return self


class ResolveUpdatesResponse(BaseModel):
    """Resolve updates response."""

    resolved: int
    remaining: int


class ResolveUpdatesUseCase(BaseUseCase):
    """Use case for clearing inbox updates. Idempotent."""

    def __init__(self, inbox_service: InboxService) -> None:
        """Initialize resolve updates use case.

        Args:
            inbox_service: Inbox domain service
        """
        self.inbox_service = inbox_service
        self._hooks = {
            ResolutionTrigger.CONVERSATION_OPENED: inbox_service.on_chat_opened,
            ResolutionTrigger.EXPLICIT_DECISION: inbox_service.on_join_request_decided,
            ResolutionTrigger.ENTITY_VIEWED: inbox_service.on_entity_viewed,
        }

    async def execute(self, request: ResolveUpdatesRequest) -> ResolveUpdatesResponse:
        """Resolve the targeted updates.

        Args:
            request: Resolve updates request

        Returns:
            How many updates were newly resolved and how many remain
        """
        if request.update_id is not None:
            resolved = await self.inbox_service.resolve_update(
                UpdateId(request.update_id)
            )
        elif request.trigger is not None:
            resolved = await self._hooks[request.trigger](request.event_id)
        elif request.type is not None:
            resolved = await self.inbox_service.resolve_updates_by_event_and_type(
                request.event_id, request.type
            )
        else:
            resolved = await self.inbox_service.resolve_updates_by_event(
                request.event_id
            )

        remaining = await self.inbox_service.get_unresolved_count()
        return ResolveUpdatesResponse(resolved=resolved, remaining=remaining)
