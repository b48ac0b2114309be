"""Inbox routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from breakloop.application.usecase.inbox import (
    EmitUpdateRequest,
    EmitUpdateResponse,
    EmitUpdateUseCase,
    GetBadgeCountsRequest,
    GetBadgeCountsResponse,
    GetBadgeCountsUseCase,
    GetInboxRequest,
    GetInboxResponse,
    GetInboxUseCase,
    ResolveUpdatesRequest,
    ResolveUpdatesResponse,
    ResolveUpdatesUseCase,
)
from breakloop.domain.value import UpdateType
from breakloop.interface.api.identity import Actor, get_actor

router = APIRouter(prefix="/inbox", tags=["inbox"], route_class=DishkaRoute)


class EmitUpdateAPIRequest(BaseModel):
    """API request for publishing an update. The actor comes from headers."""

    type: UpdateType
    event_id: str = Field(min_length=1)
    message: str | None = None


@router.get("", response_model=GetInboxResponse)
async def get_inbox(
    get_inbox_use_case: FromDishka[GetInboxUseCase],
    limit: int | None = Query(default=None, ge=1, le=200),
) -> GetInboxResponse:
    """Unresolved updates, most recent first, with relative times."""
    return await get_inbox_use_case.execute(GetInboxRequest(limit=limit))


@router.get("/badge", response_model=GetBadgeCountsResponse)
async def get_badge_counts(
    get_badge_counts_use_case: FromDishka[GetBadgeCountsUseCase],
    actor: Actor = Depends(get_actor),
) -> GetBadgeCountsResponse:
    """Unresolved update count plus unread conversation count."""
    return await get_badge_counts_use_case.execute(
        GetBadgeCountsRequest(user_id=actor.user_id)
    )


@router.post("/resolve", response_model=ResolveUpdatesResponse)
async def resolve_updates(
    request: ResolveUpdatesRequest,
    resolve_updates_use_case: FromDishka[ResolveUpdatesUseCase],
) -> ResolveUpdatesResponse:
    """Resolve updates by id, by event, by event and type, or by trigger.

    Resolving twice is harmless; the second call reports 0.
    """
    return await resolve_updates_use_case.execute(request)


@router.post(
    "/updates", response_model=EmitUpdateResponse, status_code=status.HTTP_201_CREATED
)
async def emit_update(
    request: EmitUpdateAPIRequest,
    emit_update_use_case: FromDishka[EmitUpdateUseCase],
    actor: Actor = Depends(get_actor),
) -> EmitUpdateResponse:
    """Publish an activity update on behalf of the acting user.

    Args:
        request: Update type, correlation key and optional message
        emit_update_use_case: Emit update use case from DI
        actor: Acting user, recorded as the update's actor

    Returns:
        The appended update
    """
    return await emit_update_use_case.execute(
        EmitUpdateRequest(
            type=request.type,
            event_id=request.event_id,
            actor_id=actor.user_id,
            actor_name=actor.user_name,
            message=request.message,
        )
    )
