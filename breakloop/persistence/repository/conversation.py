"""Key-value implementations of the conversation repositories."""

from collections.abc import Callable

from pydantic import TypeAdapter

from breakloop.domain.model import LegacyChatMessage, PrivateConversation
from breakloop.domain.repository import ConversationRepository, LegacyChatRepository
from breakloop.domain.value import ConversationId
from breakloop.persistence.repository.base import KeyValueCollection
from breakloop.persistence.store import KeyValueStore

Conversations = dict[ConversationId, PrivateConversation]
LegacyChats = dict[str, list[LegacyChatMessage] | None]


class KeyValueConversationRepository(
    KeyValueCollection[Conversations], ConversationRepository
):
    """Conversations stored as one JSON object keyed by conversation id."""

    def __init__(self, store: KeyValueStore, key: str) -> None:
        super().__init__(store, key, TypeAdapter(Conversations), dict)

    async def find_all(self) -> Conversations:
        return await self._read()

    async def find_by_id(
        self, conversation_id: ConversationId
    ) -> PrivateConversation | None:
        return (await self._read()).get(conversation_id)

    async def get_or_add(self, conversation: PrivateConversation) -> PrivateConversation:
        def change(conversations: Conversations):
            existing = conversations.get(conversation.id)
            if existing is not None:
                return None, existing
            return {**conversations, conversation.id: conversation}, conversation

        return await self._modify(change)

    async def update_by_id(
        self,
        conversation_id: ConversationId,
        change: Callable[[PrivateConversation], PrivateConversation | None],
    ) -> PrivateConversation | None:
        def apply(conversations: Conversations):
            current = conversations.get(conversation_id)
            if current is None:
                return None, None
            replacement = change(current)
            if replacement is None:
                return None, None
            return {**conversations, conversation_id: replacement}, replacement

        return await self._modify(apply)

    async def add_missing(self, conversations: Conversations) -> int:
        def change(stored: Conversations):
            missing = {
                cid: conv for cid, conv in conversations.items() if cid not in stored
            }
            if not missing:
                return None, 0
            return {**stored, **missing}, len(missing)

        return await self._modify(change)


class KeyValueLegacyChatRepository(KeyValueCollection[LegacyChats], LegacyChatRepository):
    """Legacy per-friend chat record. Read only."""

    def __init__(self, store: KeyValueStore, key: str) -> None:
        super().__init__(store, key, TypeAdapter(LegacyChats), dict)

    async def load(self) -> LegacyChats:
        return await self._read()
