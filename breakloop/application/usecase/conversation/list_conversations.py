"""List conversations use case."""

from datetime import datetime

from pydantic import BaseModel

from breakloop.application.usecase.base import BaseUseCase
from breakloop.application.usecase.conversation.common import MessageItem
from breakloop.domain.service import ConversationService
from breakloop.domain.value import UserId


class ConversationSummary(BaseModel):
    """Conversation row in the conversation list."""

    conversation_id: str
    other_participant_id: str | None
    last_message: MessageItem | None
    last_message_at: datetime | None
    message_count: int
    unread: bool


class ListConversationsRequest(BaseModel):
    """List conversations request."""

    user_id: str


class ListConversationsResponse(BaseModel):
    """List conversations response."""

    conversations: list[ConversationSummary]
    unread_count: int


class ListConversationsUseCase(BaseUseCase):
    """Use case for the conversation list, latest activity first.

    Only conversations the user takes part in and that have messages
    are listed.
    """

    def __init__(self, conversation_service: ConversationService) -> None:
        """Initialize list conversations use case.

        Args:
            conversation_service: Conversation domain service
        """
        self.conversation_service = conversation_service

    async def execute(
        self, request: ListConversationsRequest
    ) -> ListConversationsResponse:
        user_id = UserId(request.user_id)
        service = self.conversation_service
        conversations = await service.get_all_conversations_sorted()

        summaries = [
            ConversationSummary(
                conversation_id=conv.id,
                other_participant_id=service.get_other_participant_id(conv, user_id),
                last_message=(
                    MessageItem.from_domain(conv.last_message)
                    if conv.last_message
                    else None
                ),
                last_message_at=conv.last_message_at,
                message_count=len(conv.messages),
                unread=service.is_conversation_unread(conv, user_id),
            )
            for conv in conversations
            if user_id in conv.participant_ids
        ]

        return ListConversationsResponse(
            conversations=summaries,
            unread_count=sum(1 for summary in summaries if summary.unread),
        )
