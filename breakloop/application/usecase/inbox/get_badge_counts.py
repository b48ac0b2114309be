"""Badge counts use case."""

from pydantic import BaseModel

from breakloop.application.usecase.base import BaseUseCase
from breakloop.domain.service import ConversationService, InboxService
from breakloop.domain.value import UserId


class GetBadgeCountsRequest(BaseModel):
    """Badge counts request."""

    user_id: str


class GetBadgeCountsResponse(BaseModel):
    """Badge counts response."""

    inbox: int
    unread_conversations: int
    total: int


class GetBadgeCountsUseCase(BaseUseCase):
    """Use case for the app badge: unresolved updates plus unread chats.

    Both counts are derived from stored state on every call.
    """

    def __init__(
        self,
        inbox_service: InboxService,
        conversation_service: ConversationService,
    ) -> None:
        self.inbox_service = inbox_service
        self.conversation_service = conversation_service

    async def execute(self, request: GetBadgeCountsRequest) -> GetBadgeCountsResponse:
        inbox = await self.inbox_service.get_unresolved_count()
        unread = await self.conversation_service.get_unread_conversation_count(
            UserId(request.user_id)
        )
        return GetBadgeCountsResponse(
            inbox=inbox, unread_conversations=unread, total=inbox + unread
        )
