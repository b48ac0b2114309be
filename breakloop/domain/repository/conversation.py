"""Private conversation repository interfaces."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from breakloop.domain.model.conversation import LegacyChatMessage, PrivateConversation
from breakloop.domain.value import ConversationId


class ConversationRepository(ABC):
    """Repository for private conversations, keyed by conversation id."""

    @abstractmethod
    async def find_all(self) -> dict[ConversationId, PrivateConversation]:
        """Return every conversation keyed by id."""
        pass

    @abstractmethod
    async def find_by_id(
        self, conversation_id: ConversationId
    ) -> PrivateConversation | None:
        """Find a conversation by ID."""
        pass

    @abstractmethod
    async def get_or_add(self, conversation: PrivateConversation) -> PrivateConversation:
        """Store ``conversation`` unless one with the same id exists.

        Returns:
            The stored conversation (existing or newly added)
        """
        pass

    @abstractmethod
    async def update_by_id(
        self,
        conversation_id: ConversationId,
        change: Callable[[PrivateConversation], PrivateConversation | None],
    ) -> PrivateConversation | None:
        """Atomically apply a change to a conversation.

        Returns:
            The replacement conversation, or None if not found or unchanged
        """
        pass

    @abstractmethod
    async def add_missing(
        self, conversations: dict[ConversationId, PrivateConversation]
    ) -> int:
        """Store the given conversations whose ids are not present yet.

        Returns:
            Number of conversations added
        """
        pass


class LegacyChatRepository(ABC):
    """Read-only access to the legacy per-friend chat store."""

    @abstractmethod
    async def load(self) -> dict[str, list[LegacyChatMessage] | None]:
        """Return legacy messages keyed by friend id.

        A friend may map to None when the legacy client cleared the thread.
        """
        pass
