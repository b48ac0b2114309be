"""Migrate legacy chats use case."""

from pydantic import BaseModel

from breakloop.application.usecase.base import BaseUseCase
from breakloop.domain.service import ConversationService
from breakloop.domain.value import UserId


class MigrateLegacyChatsRequest(BaseModel):
    """Migrate legacy chats request."""

    user_id: str


class MigrateLegacyChatsResponse(BaseModel):
    """Migrate legacy chats response."""

    conversations_added: int


class MigrateLegacyChatsUseCase(BaseUseCase):
    """Use case for importing legacy per-friend chats. Safe to rerun."""

    def __init__(self, conversation_service: ConversationService) -> None:
        self.conversation_service = conversation_service

    async def execute(
        self, request: MigrateLegacyChatsRequest
    ) -> MigrateLegacyChatsResponse:
        added = await self.conversation_service.import_legacy_chats(
            UserId(request.user_id)
        )
        return MigrateLegacyChatsResponse(conversations_added=added)
