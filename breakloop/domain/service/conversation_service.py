"""Private conversation domain service."""

from collections.abc import Mapping
from datetime import datetime, timedelta

import logfire

from breakloop.config import ConversationSettings
from breakloop.domain.error import BusinessRuleViolationError
from breakloop.domain.model.conversation import (
    LegacyChatMessage,
    PrivateConversation,
    PrivateMessage,
)
from breakloop.domain.repository import ConversationRepository, LegacyChatRepository
from breakloop.domain.value import ConversationId, MessageId, UserId
from breakloop.util.clock import Clock
from breakloop.util.tokens import generate_id

from .base import Service


def get_conversation_id(user_id1: UserId, user_id2: UserId) -> ConversationId:
    """Derive the conversation id of a pair. Symmetric in its arguments."""
    first, second = sorted((user_id1, user_id2))
    return ConversationId(f"conv_{first}_{second}")


def _participants(user_id1: UserId, user_id2: UserId) -> tuple[UserId, UserId]:
    first, second = sorted((user_id1, user_id2))
    return first, second


class ConversationService(Service):
    """Domain service for one-to-one conversations."""

    def __init__(
        self,
        conversation_repository: ConversationRepository,
        legacy_chat_repository: LegacyChatRepository,
        clock: Clock,
        conversation_settings: ConversationSettings,
    ) -> None:
        """Initialize conversation service.

        Args:
            conversation_repository: Conversation repository
            legacy_chat_repository: Legacy chat store, read by migration only
            clock: Source of the current time
            conversation_settings: Conversation configuration
        """
        self.conversation_repository = conversation_repository
        self.legacy_chat_repository = legacy_chat_repository
        self.clock = clock
        self.settings = conversation_settings

    get_conversation_id = staticmethod(get_conversation_id)

    async def get_or_create_conversation(
        self, user_id1: UserId, user_id2: UserId
    ) -> PrivateConversation:
        """Return the pair's conversation, creating an empty one if needed.

        Safe to call repeatedly and from either participant.

        Raises:
            BusinessRuleViolationError: If the derived id already belongs to
                another pair, e.g. ("a", "b_c") and ("a_b", "c")
        """
        with logfire.span(
            "conversation_service.get_or_create_conversation",
            user_id1=str(user_id1),
            user_id2=str(user_id2),
        ):
            candidate = PrivateConversation(
                id=get_conversation_id(user_id1, user_id2),
                participant_ids=_participants(user_id1, user_id2),
                messages=[],
                created_at=self.clock.now(),
                last_message_at=None,
            )
            conversation = await self.conversation_repository.get_or_add(candidate)
            if tuple(conversation.participant_ids) != candidate.participant_ids:
                logfire.warn(
                    "Conversation id taken by another pair",
                    conversation_id=candidate.id,
                    participant_ids=list(conversation.participant_ids),
                )
                raise BusinessRuleViolationError(
                    f"Conversation {candidate.id} belongs to other participants"
                )
            return conversation

    async def get_conversation(
        self, conversation_id: ConversationId
    ) -> PrivateConversation | None:
        return await self.conversation_repository.find_by_id(conversation_id)

    async def add_message_to_conversation(
        self,
        conversation_id: ConversationId,
        sender_id: UserId,
        sender_name: str,
        text: str,
    ) -> PrivateConversation | None:
        """Append a message to an existing conversation.

        The conversation must exist; call ``get_or_create_conversation``
        first. A missing conversation drops the message with a warning.

        Args:
            conversation_id: Target conversation
            sender_id: Sender ID
            sender_name: Sender display name
            text: Message text

        Returns:
            The updated conversation, or None if it does not exist
        """
        with logfire.span(
            "conversation_service.add_message_to_conversation",
            conversation_id=conversation_id,
            sender_id=str(sender_id),
        ):

            def append(conversation: PrivateConversation) -> PrivateConversation:
                now = self.clock.now()
                message = PrivateMessage(
                    id=MessageId(generate_id("msg", now)),
                    conversation_id=conversation_id,
                    sender_id=sender_id,
                    sender_name=sender_name,
                    text=text,
                    created_at=now,
                )
                return conversation.model_copy(
                    update={
                        "messages": [*conversation.messages, message],
                        "last_message_at": message.created_at,
                    }
                )

            updated = await self.conversation_repository.update_by_id(
                conversation_id, append
            )
            if updated is None:
                logfire.warn("Conversation not found", conversation_id=conversation_id)
            return updated

    async def get_all_conversations_sorted(self) -> list[PrivateConversation]:
        """Conversations with at least one message, latest activity first."""
        conversations = await self.conversation_repository.find_all()
        with_messages = [conv for conv in conversations.values() if conv.messages]
        with_messages.sort(
            key=lambda conv: conv.last_message_at or conv.created_at, reverse=True
        )
        return with_messages

    def get_other_participant_id(
        self, conversation: PrivateConversation, current_user_id: UserId
    ) -> UserId | None:
        for participant_id in conversation.participant_ids:
            if participant_id != current_user_id:
                return participant_id
        return None

    def is_conversation_unread(
        self, conversation: PrivateConversation | None, current_user_id: UserId
    ) -> bool:
        """Check whether the other participant wrote since the last read.

        Args:
            conversation: Conversation to check
            current_user_id: Viewing user

        Returns:
            True if the last message is from someone else and arrived
            after the conversation was last read (or it was never read)
        """
        if conversation is None or conversation.last_message is None:
            return False

        last_message = conversation.last_message
        if last_message.sender_id == current_user_id:
            return False

        if conversation.last_read_at is None:
            return True

        return last_message.created_at > conversation.last_read_at

    async def mark_conversation_as_read(
        self, conversation_id: ConversationId
    ) -> PrivateConversation | None:
        """Stamp ``last_read_at`` with the current time."""
        with logfire.span(
            "conversation_service.mark_conversation_as_read",
            conversation_id=conversation_id,
        ):
            updated = await self.conversation_repository.update_by_id(
                conversation_id,
                lambda conv: conv.model_copy(update={"last_read_at": self.clock.now()}),
            )
            if updated is None:
                logfire.warn("Conversation not found", conversation_id=conversation_id)
            return updated

    async def get_unread_conversation_count(self, current_user_id: UserId) -> int:
        """Count conversations of ``current_user_id`` with unread messages."""
        conversations = await self.conversation_repository.find_all()
        return sum(
            1
            for conv in conversations.values()
            if current_user_id in conv.participant_ids
            and self.is_conversation_unread(conv, current_user_id)
        )

    def migrate_old_chat_messages(
        self,
        old_format: Mapping[str, list[LegacyChatMessage] | None],
        current_user_id: UserId,
    ) -> dict[ConversationId, PrivateConversation]:
        """Convert legacy per-friend threads into conversations.

        The legacy format has no timestamps, so they are synthesized as a
        best-effort backfill: with ``n`` messages, message ``i`` is dated
        ``now - (n - i) * spacing`` and the conversation ``now - n * spacing``.
        These dates are approximate and must not be read as real history.

        Args:
            old_format: Legacy messages keyed by friend id
            current_user_id: Local user, the ``"me"`` sender

        Returns:
            Conversations keyed by id; empty threads are skipped
        """
        now = self.clock.now()
        spacing = timedelta(seconds=self.settings.migration_spacing_seconds)
        conversations: dict[ConversationId, PrivateConversation] = {}

        for friend_id, messages in old_format.items():
            if not messages:
                continue

            friend = UserId(friend_id)
            conversation_id = get_conversation_id(current_user_id, friend)
            count = len(messages)
            migrated = [
                self._migrate_message(
                    msg, index, count, conversation_id, current_user_id, friend, now
                )
                for index, msg in enumerate(messages)
            ]

            conversations[conversation_id] = PrivateConversation(
                id=conversation_id,
                participant_ids=_participants(current_user_id, friend),
                messages=migrated,
                created_at=now - count * spacing,
                last_message_at=migrated[-1].created_at,
            )

        return conversations

    def _migrate_message(
        self,
        msg: LegacyChatMessage,
        index: int,
        count: int,
        conversation_id: ConversationId,
        current_user_id: UserId,
        friend_id: UserId,
        now: datetime,
    ) -> PrivateMessage:
        spacing = timedelta(seconds=self.settings.migration_spacing_seconds)
        from_me = msg.sender == "me"
        millis = int(now.timestamp() * 1000)
        return PrivateMessage(
            id=MessageId(msg.id or f"msg_migrated_{millis}_{index}"),
            conversation_id=conversation_id,
            sender_id=current_user_id if from_me else friend_id,
            # Names are not available in the legacy format
            sender_name="You" if from_me else "Friend",
            text=msg.text,
            created_at=now - (count - index) * spacing,
        )

    async def import_legacy_chats(self, current_user_id: UserId) -> int:
        """Migrate the legacy chat store into conversations.

        Only conversations not already stored are written, so running this
        again is harmless. The legacy store is left untouched.

        Args:
            current_user_id: Local user

        Returns:
            Number of conversations added
        """
        with logfire.span(
            "conversation_service.import_legacy_chats",
            current_user_id=str(current_user_id),
        ):
            legacy = await self.legacy_chat_repository.load()
            if not legacy:
                return 0

            migrated = self.migrate_old_chat_messages(legacy, current_user_id)
            added = await self.conversation_repository.add_missing(migrated)
            logfire.info(
                "Legacy chats migrated",
                threads=len(legacy),
                conversations_added=added,
            )
            return added
