"""Private conversation routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from breakloop.application.usecase.conversation import (
    ListConversationsRequest,
    ListConversationsResponse,
    ListConversationsUseCase,
    MigrateLegacyChatsRequest,
    MigrateLegacyChatsResponse,
    MigrateLegacyChatsUseCase,
    OpenConversationRequest,
    OpenConversationResponse,
    OpenConversationUseCase,
    SendMessageRequest,
    SendMessageResponse,
    SendMessageUseCase,
)
from breakloop.interface.api.identity import Actor, get_actor

router = APIRouter(
    prefix="/conversations", tags=["conversations"], route_class=DishkaRoute
)


class SendMessageAPIRequest(BaseModel):
    """API request for sending a message."""

    text: str = Field(min_length=1, max_length=5000)


@router.get("", response_model=ListConversationsResponse)
async def list_conversations(
    list_conversations_use_case: FromDishka[ListConversationsUseCase],
    actor: Actor = Depends(get_actor),
) -> ListConversationsResponse:
    """Conversations with messages, latest activity first."""
    return await list_conversations_use_case.execute(
        ListConversationsRequest(user_id=actor.user_id)
    )


@router.post("/migrate", response_model=MigrateLegacyChatsResponse)
async def migrate_legacy_chats(
    migrate_legacy_chats_use_case: FromDishka[MigrateLegacyChatsUseCase],
    actor: Actor = Depends(get_actor),
) -> MigrateLegacyChatsResponse:
    """Import legacy chats for the acting user. Safe to call repeatedly."""
    return await migrate_legacy_chats_use_case.execute(
        MigrateLegacyChatsRequest(user_id=actor.user_id)
    )


@router.post("/{other_user_id}/open", response_model=OpenConversationResponse)
async def open_conversation(
    other_user_id: str,
    open_conversation_use_case: FromDishka[OpenConversationUseCase],
    actor: Actor = Depends(get_actor),
) -> OpenConversationResponse:
    """Open the conversation with another user and mark it read.

    Creates the conversation if the pair has none yet.
    """
    return await open_conversation_use_case.execute(
        OpenConversationRequest(user_id=actor.user_id, other_user_id=other_user_id)
    )


@router.post(
    "/{other_user_id}/messages",
    response_model=SendMessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def send_message(
    other_user_id: str,
    request: SendMessageAPIRequest,
    send_message_use_case: FromDishka[SendMessageUseCase],
    actor: Actor = Depends(get_actor),
) -> SendMessageResponse:
    """Send a message to another user.

    Args:
        other_user_id: Recipient
        request: Message text
        send_message_use_case: Send message use case from DI
        actor: Acting user, the sender

    Returns:
        The stored message
    """
    return await send_message_use_case.execute(
        SendMessageRequest(
            sender_id=actor.user_id,
            sender_name=actor.user_name,
            recipient_id=other_user_id,
            text=request.text,
        )
    )
