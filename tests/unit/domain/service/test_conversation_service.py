"""Unit tests for ConversationService."""

from datetime import timedelta

import pytest

from breakloop.domain.error import BusinessRuleViolationError
from breakloop.domain.model import LegacyChatMessage
from breakloop.domain.repository import ConversationRepository
from breakloop.domain.service import ConversationService, get_conversation_id
from breakloop.domain.value import ConversationId, UserId
from breakloop.persistence.store import InMemoryKeyValueStore
from breakloop.util.clock import FixedClock
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

ALICE = UserId("alice")
BOB = UserId("bob")
CAROL = UserId("carol")


class TestConversationId:
    """Tests for get_conversation_id."""

    @pytest.mark.parametrize(
        ("a", "b"),
        [("alice", "bob"), ("bob", "alice"), ("u_10", "u_9"), ("same", "same")],
    )
    def test_symmetric(self, a, b):
        assert get_conversation_id(UserId(a), UserId(b)) == get_conversation_id(
            UserId(b), UserId(a)
        )

    def test_format(self):
        assert get_conversation_id(BOB, ALICE) == "conv_alice_bob"


class TestGetOrCreateConversation:
    """Tests for get_or_create_conversation."""

    @pytest.mark.asyncio
    async def test_creates_empty_conversation(self, unit_env):
        service = await unit_env.get(ConversationService)
        clock = await unit_env.get(FixedClock)

        conversation = await service.get_or_create_conversation(BOB, ALICE)

        assert conversation.id == "conv_alice_bob"
        assert conversation.participant_ids == (ALICE, BOB)
        assert conversation.messages == []
        assert conversation.created_at == clock.now()
        assert conversation.last_message_at is None

    @pytest.mark.asyncio
    async def test_idempotent_from_either_side(self, unit_env):
        service = await unit_env.get(ConversationService)
        repo = await unit_env.get(ConversationRepository)
        clock = await unit_env.get(FixedClock)

        first = await service.get_or_create_conversation(ALICE, BOB)
        clock.advance(minutes=10)
        second = await service.get_or_create_conversation(BOB, ALICE)

        assert second == first
        assert len(await repo.find_all()) == 1

    @pytest.mark.asyncio
    async def test_pair_sharing_derived_id_is_refused(self, unit_env):
        """("a", "b_c") and ("a_b", "c") derive the same id."""
        service = await unit_env.get(ConversationService)
        repo = await unit_env.get(ConversationRepository)
        first = await service.get_or_create_conversation(UserId("a"), UserId("b_c"))

        with pytest.raises(BusinessRuleViolationError):
            await service.get_or_create_conversation(UserId("a_b"), UserId("c"))

        stored = await repo.find_all()
        assert list(stored) == [first.id]
        assert stored[first.id].participant_ids == ("a", "b_c")


class TestAddMessage:
    """Tests for add_message_to_conversation."""

    @pytest.mark.asyncio
    async def test_appends_message(self, unit_env):
        service = await unit_env.get(ConversationService)
        clock = await unit_env.get(FixedClock)
        conversation = await service.get_or_create_conversation(ALICE, BOB)
        clock.advance(minutes=1)

        updated = await service.add_message_to_conversation(
            conversation.id, ALICE, "Alice", "Hello"
        )

        message = updated.last_message
        assert message.id.startswith("msg_")
        assert message.conversation_id == conversation.id
        assert message.sender_id == ALICE
        assert message.text == "Hello"
        assert message.created_at == clock.now()
        assert updated.last_message_at == clock.now()

    @pytest.mark.asyncio
    async def test_missing_conversation_is_noop(self, unit_env):
        service = await unit_env.get(ConversationService)
        repo = await unit_env.get(ConversationRepository)

        result = await service.add_message_to_conversation(
            ConversationId("conv_alice_bob"), ALICE, "Alice", "Hello?"
        )

        assert result is None
        assert await repo.find_all() == {}


class TestSortingAndUnread:
    """Tests for listing, unread state and read marking."""

    @pytest.mark.asyncio
    async def test_empty_conversations_not_listed(self, unit_env):
        service = await unit_env.get(ConversationService)
        await service.get_or_create_conversation(ALICE, BOB)

        assert await service.get_all_conversations_sorted() == []

    @pytest.mark.asyncio
    async def test_most_recent_activity_first(self, unit_env):
        service = await unit_env.get(ConversationService)
        clock = await unit_env.get(FixedClock)
        with_bob = await service.get_or_create_conversation(ALICE, BOB)
        with_carol = await service.get_or_create_conversation(ALICE, CAROL)

        await service.add_message_to_conversation(with_carol.id, CAROL, "Carol", "hey")
        for sender, name in [(ALICE, "Alice"), (BOB, "Bob"), (ALICE, "Alice")]:
            clock.advance(minutes=1)
            await service.add_message_to_conversation(with_bob.id, sender, name, "hi")

        conversations = await service.get_all_conversations_sorted()

        assert [c.id for c in conversations] == [with_bob.id, with_carol.id]

    @pytest.mark.asyncio
    async def test_other_participant(self, unit_env):
        service = await unit_env.get(ConversationService)
        conversation = await service.get_or_create_conversation(ALICE, BOB)

        assert service.get_other_participant_id(conversation, ALICE) == BOB
        assert service.get_other_participant_id(conversation, BOB) == ALICE

    @pytest.mark.asyncio
    async def test_unread_rules(self, unit_env):
        service = await unit_env.get(ConversationService)
        clock = await unit_env.get(FixedClock)
        conversation = await service.get_or_create_conversation(ALICE, BOB)

        # No messages
        assert service.is_conversation_unread(conversation, ALICE) is False
        assert service.is_conversation_unread(None, ALICE) is False

        # Never read, last message from the other side
        conversation = await service.add_message_to_conversation(
            conversation.id, BOB, "Bob", "ping"
        )
        assert service.is_conversation_unread(conversation, ALICE) is True
        # Own message is never unread
        assert service.is_conversation_unread(conversation, BOB) is False

        clock.advance(seconds=30)
        conversation = await service.mark_conversation_as_read(conversation.id)
        assert conversation.last_read_at == clock.now()
        assert service.is_conversation_unread(conversation, ALICE) is False

        clock.advance(seconds=30)
        conversation = await service.add_message_to_conversation(
            conversation.id, BOB, "Bob", "pong"
        )
        assert service.is_conversation_unread(conversation, ALICE) is True

    @pytest.mark.asyncio
    async def test_message_at_read_instant_is_read(self, unit_env):
        """Unread requires the last message to be strictly after the read."""
        service = await unit_env.get(ConversationService)
        conversation = await service.get_or_create_conversation(ALICE, BOB)
        await service.add_message_to_conversation(conversation.id, BOB, "Bob", "hi")

        conversation = await service.mark_conversation_as_read(conversation.id)

        assert conversation.last_read_at == conversation.last_message_at
        assert service.is_conversation_unread(conversation, ALICE) is False

    @pytest.mark.asyncio
    async def test_unread_count(self, unit_env):
        service = await unit_env.get(ConversationService)
        with_bob = await service.get_or_create_conversation(ALICE, BOB)
        with_carol = await service.get_or_create_conversation(ALICE, CAROL)
        await service.get_or_create_conversation(BOB, CAROL)
        await service.add_message_to_conversation(with_bob.id, BOB, "Bob", "hi")
        await service.add_message_to_conversation(with_carol.id, ALICE, "Alice", "yo")

        assert await service.get_unread_conversation_count(ALICE) == 1
        assert await service.get_unread_conversation_count(CAROL) == 1

    @pytest.mark.asyncio
    async def test_mark_missing_conversation_as_read(self, unit_env):
        service = await unit_env.get(ConversationService)

        assert await service.mark_conversation_as_read(ConversationId("conv_x_y")) is None


class TestMigration:
    """Tests for legacy chat migration."""

    @pytest.mark.asyncio
    async def test_migrate_old_chat_messages(self, unit_env):
        service = await unit_env.get(ConversationService)
        clock = await unit_env.get(FixedClock)
        now = clock.now()
        legacy = {
            "bob": [
                LegacyChatMessage(id="m1", sender="me", text="hi bob"),
                LegacyChatMessage(sender="bob", text="hi alice"),
                LegacyChatMessage(id="m3", sender="me", text="how are you?"),
            ],
            "carol": [],
            "dave": None,
        }

        result = service.migrate_old_chat_messages(legacy, ALICE)

        assert list(result) == ["conv_alice_bob"]
        conversation = result[ConversationId("conv_alice_bob")]
        assert conversation.participant_ids == (ALICE, BOB)
        assert conversation.created_at == now - timedelta(minutes=3)

        messages = conversation.messages
        assert [m.created_at for m in messages] == [
            now - timedelta(minutes=3),
            now - timedelta(minutes=2),
            now - timedelta(minutes=1),
        ]
        assert conversation.last_message_at == messages[-1].created_at
        assert [m.sender_id for m in messages] == [ALICE, BOB, ALICE]
        assert [m.sender_name for m in messages] == ["You", "Friend", "You"]
        assert messages[0].id == "m1"
        millis = int(now.timestamp() * 1000)
        assert messages[1].id == f"msg_migrated_{millis}_1"
        assert messages[2].id == "m3"

    @pytest.mark.asyncio
    async def test_import_is_idempotent(self, unit_env):
        service = await unit_env.get(ConversationService)
        repo = await unit_env.get(ConversationRepository)
        clock = await unit_env.get(FixedClock)
        store = await unit_env.get(InMemoryKeyValueStore)
        store.seed(
            "chat_messages_v0",
            b'{"bob": [{"id": "m1", "sender": "me", "text": "hi"}], "carol": []}',
        )

        assert await service.import_legacy_chats(ALICE) == 1
        first = await repo.find_all()
        clock.advance(hours=1)
        assert await service.import_legacy_chats(ALICE) == 0

        assert await repo.find_all() == first
        assert store.raw("chat_messages_v0") is not None

    @pytest.mark.asyncio
    async def test_import_keeps_existing_conversation(self, unit_env):
        service = await unit_env.get(ConversationService)
        store = await unit_env.get(InMemoryKeyValueStore)
        existing = await service.get_or_create_conversation(ALICE, BOB)
        await service.add_message_to_conversation(existing.id, BOB, "Bob", "new app")
        store.seed("chat_messages_v0", b'{"bob": [{"sender": "bob", "text": "old"}]}')

        assert await service.import_legacy_chats(ALICE) == 0

        conversation = await service.get_conversation(existing.id)
        assert [m.text for m in conversation.messages] == ["new app"]

    @pytest.mark.asyncio
    async def test_import_without_legacy_store(self, unit_env):
        service = await unit_env.get(ConversationService)

        assert await service.import_legacy_chats(ALICE) == 0
