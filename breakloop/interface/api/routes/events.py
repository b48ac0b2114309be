"""Event group chat routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from breakloop.application.usecase.event_chat import (
    GetEventMessagesRequest,
    GetEventMessagesResponse,
    GetEventMessagesUseCase,
    PostEventMessageRequest,
    PostEventMessageResponse,
    PostEventMessageUseCase,
)
from breakloop.interface.api.identity import Actor, get_actor

router = APIRouter(prefix="/events", tags=["events"], route_class=DishkaRoute)


class PostEventMessageAPIRequest(BaseModel):
    """API request for posting to an event chat."""

    text: str = Field(min_length=1, max_length=5000)


@router.get("/{event_id}/chat", response_model=GetEventMessagesResponse)
async def get_event_messages(
    event_id: str,
    get_event_messages_use_case: FromDishka[GetEventMessagesUseCase],
    actor: Actor = Depends(get_actor),
) -> GetEventMessagesResponse:
    """Messages of an event's group chat, oldest first."""
    return await get_event_messages_use_case.execute(
        GetEventMessagesRequest(event_id=event_id)
    )


@router.post(
    "/{event_id}/chat",
    response_model=PostEventMessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def post_event_message(
    event_id: str,
    request: PostEventMessageAPIRequest,
    post_event_message_use_case: FromDishka[PostEventMessageUseCase],
    actor: Actor = Depends(get_actor),
) -> PostEventMessageResponse:
    """Post to an event's group chat and notify the inbox.

    Args:
        event_id: Event owning the chat
        request: Message text
        post_event_message_use_case: Post event message use case from DI
        actor: Acting user, the sender

    Returns:
        The stored message
    """
    return await post_event_message_use_case.execute(
        PostEventMessageRequest(
            event_id=event_id,
            sender_id=actor.user_id,
            sender_name=actor.user_name,
            text=request.text,
        )
    )
