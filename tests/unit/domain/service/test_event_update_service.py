"""Unit tests for EventUpdateService."""

import pytest

from breakloop.domain.repository import EventUpdateRepository
from breakloop.domain.service import EventUpdateService
from breakloop.domain.service.event_update_service import preview
from breakloop.domain.value import FriendRequestId, UpdateType, UserId
from breakloop.util.clock import FixedClock
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

BOB = UserId("bob")


class TestPreview:
    """Tests for the chat preview helper."""

    def test_short_text_unchanged(self):
        assert preview("hello") == "hello"

    def test_exactly_limit_unchanged(self):
        text = "x" * 50
        assert preview(text) == text

    def test_long_text_truncated(self):
        assert preview("x" * 51) == "x" * 50 + "..."


class TestCreateEventUpdate:
    """Tests for create_event_update method."""

    @pytest.mark.asyncio
    async def test_create_does_not_persist(self, unit_env):
        service = await unit_env.get(EventUpdateService)
        repo = await unit_env.get(EventUpdateRepository)
        clock = await unit_env.get(FixedClock)

        update = service.create_event_update(
            type=UpdateType.JOIN_REQUEST, event_id="evt_1", actor_id=BOB
        )

        assert update.id.startswith("upd_")
        assert update.resolved is False
        assert update.created_at == clock.now()
        assert await repo.find_all() == []


class TestEmitHelpers:
    """Tests for add_event_update and the emit helpers."""

    @pytest.mark.asyncio
    async def test_add_returns_full_log(self, unit_env):
        service = await unit_env.get(EventUpdateService)

        first = service.create_event_update(type=UpdateType.EVENT_CANCELLED, event_id="e1")
        second = service.create_event_update(type=UpdateType.EVENT_UPDATED, event_id="e2")
        await service.add_event_update(first)
        log = await service.add_event_update(second)

        assert log == [first, second]

    @pytest.mark.asyncio
    async def test_chat_update_stores_preview(self, unit_env):
        """A 120-character chat message is stored as 50 characters plus an ellipsis."""
        service = await unit_env.get(EventUpdateService)
        text = "".join(chr(ord("a") + i % 26) for i in range(120))

        log = await service.emit_event_chat_update("evt_1", BOB, "Bob", text)

        update = log[-1]
        assert update.type == UpdateType.EVENT_CHAT
        assert update.message == text[:50] + "..."
        assert update.actor_name == "Bob"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("emit", "update_type"),
        [
            ("emit_join_request_update", UpdateType.JOIN_REQUEST),
            ("emit_join_approved_update", UpdateType.JOIN_APPROVED),
            ("emit_join_declined_update", UpdateType.JOIN_DECLINED),
            ("emit_event_cancelled_update", UpdateType.EVENT_CANCELLED),
            ("emit_participant_left_update", UpdateType.PARTICIPANT_LEFT),
        ],
    )
    async def test_actor_helpers(self, unit_env, emit, update_type):
        service = await unit_env.get(EventUpdateService)

        log = await getattr(service, emit)("evt_9", BOB, "Bob")

        update = log[-1]
        assert update.type == update_type
        assert update.event_id == "evt_9"
        assert update.actor_id == BOB
        assert update.message is None

    @pytest.mark.asyncio
    async def test_event_updated_carries_change_description(self, unit_env):
        service = await unit_env.get(EventUpdateService)

        log = await service.emit_event_updated_update(
            "evt_1", BOB, "Bob", change_description="Moved to 7pm"
        )

        assert log[-1].message == "Moved to 7pm"

    @pytest.mark.asyncio
    async def test_friend_request_update_keyed_by_request(self, unit_env):
        service = await unit_env.get(EventUpdateService)

        log = await service.emit_friend_request_update(
            FriendRequestId("freq_1"), BOB, "Bob"
        )

        update = log[-1]
        assert update.type == UpdateType.FRIEND_REQUEST
        assert update.event_id == "freq_1"
        assert update.message == "Bob wants to be friends"
