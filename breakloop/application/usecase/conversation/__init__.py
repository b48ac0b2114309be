"""Conversation use cases."""

from breakloop.application.usecase.conversation.common import (
    ConversationDetail,
    MessageItem,
)
from breakloop.application.usecase.conversation.list_conversations import (
    ConversationSummary,
    ListConversationsRequest,
    ListConversationsResponse,
    ListConversationsUseCase,
)
from breakloop.application.usecase.conversation.migrate_legacy_chats import (
    MigrateLegacyChatsRequest,
    MigrateLegacyChatsResponse,
    MigrateLegacyChatsUseCase,
)
from breakloop.application.usecase.conversation.open_conversation import (
    OpenConversationRequest,
    OpenConversationResponse,
    OpenConversationUseCase,
)
from breakloop.application.usecase.conversation.send_message import (
    SendMessageRequest,
    SendMessageResponse,
    SendMessageUseCase,
)

__all__ = [
    "ConversationDetail",
    "ConversationSummary",
    "ListConversationsRequest",
    "ListConversationsResponse",
    "ListConversationsUseCase",
    "MessageItem",
    "MigrateLegacyChatsRequest",
    "MigrateLegacyChatsResponse",
    "MigrateLegacyChatsUseCase",
    "OpenConversationRequest",
    "OpenConversationResponse",
    "OpenConversationUseCase",
    "SendMessageRequest",
    "SendMessageResponse",
    "SendMessageUseCase",
]
