"""Open conversation use case."""

from pydantic import BaseModel

from breakloop.application.usecase.base import BaseUseCase
from breakloop.application.usecase.conversation.common import ConversationDetail
from breakloop.domain.service import ConversationService
from breakloop.domain.value import UserId


class OpenConversationRequest(BaseModel):
    """Open conversation request."""

    user_id: str
    other_user_id: str


class OpenConversationResponse(BaseModel):
    """Open conversation response."""

    conversation: ConversationDetail
    other_participant_id: str | None


class OpenConversationUseCase(BaseUseCase):
    """Use case for opening a conversation: fetch or create, then mark read."""

    def __init__(self, conversation_service: ConversationService) -> None:
        self.conversation_service = conversation_service

    async def execute(
        self, request: OpenConversationRequest
    ) -> OpenConversationResponse:
        user_id = UserId(request.user_id)
        conversation = await self.conversation_service.get_or_create_conversation(
            user_id, UserId(request.other_user_id)
        )
        # Falls back to the unread copy if the write is dropped
        read = await self.conversation_service.mark_conversation_as_read(
            conversation.id
        )
        conversation = read or conversation

        return OpenConversationResponse(
            conversation=ConversationDetail.from_domain(conversation),
            other_participant_id=self.conversation_service.get_other_participant_id(
                conversation, user_id
            ),
        )
