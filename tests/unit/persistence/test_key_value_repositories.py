"""Unit tests for the key-value backed repositories."""

import asyncio
import json

import pytest

from breakloop.domain.repository import (
    ConversationRepository,
    EventUpdateRepository,
    FriendRequestRepository,
    InviteRepository,
)
from breakloop.domain.service import (
    ConversationService,
    EventUpdateService,
    FriendRequestService,
    InboxService,
    InviteService,
)
from breakloop.domain.value import UserId
from breakloop.persistence.store import InMemoryKeyValueStore
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

ALICE = UserId("alice")
BOB = UserId("bob")


class TestStoredShape:
    """Collections are JSON documents under their configured keys."""

    @pytest.mark.asyncio
    async def test_invites_stored_as_array(self, unit_env):
        store = await unit_env.get(InMemoryKeyValueStore)
        service = await unit_env.get(InviteService)

        invite = await service.create_invite(ALICE, "Alice")

        stored = json.loads(store.raw("friend_invites_v1"))
        assert isinstance(stored, list)
        assert stored[0]["id"] == invite.id
        assert stored[0]["token"] == invite.token.root
        assert stored[0]["status"] == "active"

    @pytest.mark.asyncio
    async def test_conversations_stored_as_object(self, unit_env):
        store = await unit_env.get(InMemoryKeyValueStore)
        service = await unit_env.get(ConversationService)

        conversation = await service.get_or_create_conversation(ALICE, BOB)

        stored = json.loads(store.raw("private_messages_v1"))
        assert list(stored) == [conversation.id]
        assert stored[conversation.id]["participant_ids"] == ["alice", "bob"]

    @pytest.mark.asyncio
    async def test_collections_use_separate_keys(self, unit_env):
        store = await unit_env.get(InMemoryKeyValueStore)
        friends = await unit_env.get(FriendRequestService)
        bus = await unit_env.get(EventUpdateService)

        await friends.create_friend_request(ALICE, "Alice", BOB, "Bob")
        await bus.emit_join_request_update("evt_1", BOB, "Bob")

        assert len(json.loads(store.raw("friend_requests_v1"))) == 1
        assert len(json.loads(store.raw("event_updates_v1"))) == 1
        assert store.raw("friend_invites_v1") is None


class TestStorageFaults:
    """Storage faults degrade instead of propagating."""

    @pytest.mark.asyncio
    async def test_failed_read_is_empty(self, unit_env):
        store = await unit_env.get(InMemoryKeyValueStore)
        service = await unit_env.get(InviteService)
        repo = await unit_env.get(InviteRepository)
        await service.create_invite(ALICE, "Alice")

        store.fail_reads = True

        assert await repo.find_all() == []
        assert (await service.validate_invite("anything")).valid is False

    @pytest.mark.asyncio
    async def test_failed_write_is_dropped(self, unit_env):
        store = await unit_env.get(InMemoryKeyValueStore)
        bus = await unit_env.get(EventUpdateService)
        inbox = await unit_env.get(InboxService)

        store.fail_writes = True
        log = await bus.emit_join_request_update("evt_1", BOB, "Bob")

        assert len(log) == 1
        store.fail_writes = False
        assert await inbox.get_unresolved_count() == 0

    @pytest.mark.asyncio
    async def test_failed_read_during_append_keeps_log(self, unit_env):
        # Arrange
        store = await unit_env.get(InMemoryKeyValueStore)
        bus = await unit_env.get(EventUpdateService)
        repo = await unit_env.get(EventUpdateRepository)
        for event_id in ("evt_1", "evt_2", "evt_3"):
            await bus.emit_join_request_update(event_id, BOB, "Bob")
        stored = store.raw("event_updates_v1")

        # Act
        store.fail_reads = True
        log = await bus.emit_join_request_update("evt_x", BOB, "Bob")
        store.fail_reads = False

        # Assert
        assert [update.event_id for update in log] == ["evt_x"]
        assert store.raw("event_updates_v1") == stored
        assert [u.event_id for u in await repo.find_all()] == ["evt_1", "evt_2", "evt_3"]

    @pytest.mark.asyncio
    async def test_failed_read_during_update_keeps_records(self, unit_env):
        store = await unit_env.get(InMemoryKeyValueStore)
        service = await unit_env.get(InviteService)
        repo = await unit_env.get(InviteRepository)
        first = await service.create_invite(ALICE, "Alice")
        second = await service.create_invite(BOB, "Bob")

        store.fail_reads = True
        assert await service.mark_invite_as_used(first.token.root, BOB) is None
        store.fail_reads = False

        assert await repo.find_all() == [first, second]

    @pytest.mark.asyncio
    async def test_corrupt_record_reads_empty_and_is_replaced(self, unit_env):
        store = await unit_env.get(InMemoryKeyValueStore)
        repo = await unit_env.get(FriendRequestRepository)
        service = await unit_env.get(FriendRequestService)
        store.seed("friend_requests_v1", b"{not json")

        assert await repo.find_all() == []

        request = await service.create_friend_request(ALICE, "Alice", BOB, "Bob")

        assert await repo.find_all() == [request]
        assert json.loads(store.raw("friend_requests_v1"))[0]["id"] == request.id

    @pytest.mark.asyncio
    async def test_wrong_shape_reads_empty(self, unit_env):
        store = await unit_env.get(InMemoryKeyValueStore)
        repo = await unit_env.get(EventUpdateRepository)
        store.seed("event_updates_v1", b'[{"id": "upd_1"}]')

        assert await repo.find_all() == []

    @pytest.mark.asyncio
    async def test_corrupt_conversations_read_empty(self, unit_env):
        store = await unit_env.get(InMemoryKeyValueStore)
        repo = await unit_env.get(ConversationRepository)
        store.seed("private_messages_v1", b"[1, 2, 3]")

        assert await repo.find_all() == {}


class TestConcurrentWriters:
    """Writers of one collection are serialized within the process."""

    @pytest.mark.asyncio
    async def test_concurrent_appends_are_not_lost(self, unit_env):
        bus = await unit_env.get(EventUpdateService)
        repo = await unit_env.get(EventUpdateRepository)

        await asyncio.gather(
            *(
                bus.emit_event_chat_update(f"evt_{i}", BOB, "Bob", f"message {i}")
                for i in range(25)
            )
        )

        assert len(await repo.find_all()) == 25

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_requests_merge(self, unit_env):
        service = await unit_env.get(FriendRequestService)
        repo = await unit_env.get(FriendRequestRepository)

        results = await asyncio.gather(
            service.create_friend_request(ALICE, "Alice", BOB, "Bob"),
            service.create_friend_request(BOB, "Bob", ALICE, "Alice"),
            service.create_friend_request(ALICE, "Alice", BOB, "Bob"),
        )

        assert len({request.id for request in results}) == 1
        assert len(await repo.find_all()) == 1
