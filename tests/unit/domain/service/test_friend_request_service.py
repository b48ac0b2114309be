"""Unit tests for FriendRequestService."""

import pytest

from breakloop.domain.error import BusinessRuleViolationError, ValidationError
from breakloop.domain.repository import FriendRequestRepository
from breakloop.domain.service import FriendRequestService
from breakloop.domain.value import (
    FriendEntry,
    FriendRequestId,
    FriendRequestStatus,
    UserId,
)
from breakloop.util.clock import FixedClock
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

U1 = UserId("u1")
U2 = UserId("u2")
U3 = UserId("u3")


class TestCreateFriendRequest:
    """Tests for create_friend_request method."""

    @pytest.mark.asyncio
    async def test_create_pending_request(self, unit_env):
        # Arrange
        service = await unit_env.get(FriendRequestService)
        clock = await unit_env.get(FixedClock)

        # Act
        request = await service.create_friend_request(U1, "Alice", U2, "Bob")

        # Assert
        assert request.id.startswith("freq_")
        assert request.status == FriendRequestStatus.PENDING
        assert request.from_user_id == U1
        assert request.to_user_id == U2
        assert request.created_at == clock.now()
        assert request.responded_at is None

    @pytest.mark.asyncio
    async def test_find_existing_request_is_order_independent(self, unit_env):
        service = await unit_env.get(FriendRequestService)
        request = await service.create_friend_request(U1, "Alice", U2, "Bob")

        assert await service.find_existing_request(U2, U1) == request
        assert await service.find_existing_request(U1, U2) == request
        assert await service.find_existing_request(U1, U3) is None

    @pytest.mark.asyncio
    async def test_self_request_rejected(self, unit_env):
        service = await unit_env.get(FriendRequestService)
        repo = await unit_env.get(FriendRequestRepository)

        with pytest.raises(BusinessRuleViolationError):
            await service.create_friend_request(U1, "Alice", U1, "Alice")

        assert await repo.find_all() == []

    @pytest.mark.asyncio
    async def test_duplicate_pending_request_is_merged(self, unit_env):
        """A second request for the pair returns the first and writes nothing."""
        service = await unit_env.get(FriendRequestService)
        repo = await unit_env.get(FriendRequestRepository)
        first = await service.create_friend_request(U1, "Alice", U2, "Bob")

        same_direction = await service.create_friend_request(U1, "Alice", U2, "Bob")
        reverse = await service.create_friend_request(U2, "Bob", U1, "Alice")

        assert same_direction == first
        assert reverse == first
        assert len(await repo.find_all()) == 1

    @pytest.mark.asyncio
    async def test_if_absent_reports_whether_created(self, unit_env):
        service = await unit_env.get(FriendRequestService)

        first, first_created = await service.create_friend_request_if_absent(
            U1, "Alice", U2, "Bob"
        )
        again, again_created = await service.create_friend_request_if_absent(
            U2, "Bob", U1, "Alice"
        )

        assert first_created is True
        assert again_created is False
        assert again == first

    @pytest.mark.asyncio
    async def test_new_request_allowed_after_decline(self, unit_env):
        service = await unit_env.get(FriendRequestService)
        first = await service.create_friend_request(U1, "Alice", U2, "Bob")
        await service.update_friend_request_status(first.id, FriendRequestStatus.DECLINED)

        second = await service.create_friend_request(U1, "Alice", U2, "Bob")

        assert second.id != first.id
        assert second.status == FriendRequestStatus.PENDING


class TestAreAlreadyFriends:
    """Tests for are_already_friends method."""

    @pytest.mark.asyncio
    async def test_accepted_entry_counts(self, unit_env):
        service = await unit_env.get(FriendRequestService)
        friends = [FriendEntry(id="u2", name="Bob", status="accepted")]

        assert service.are_already_friends(U1, U2, friends) is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", ["pending", "declined"])
    async def test_non_accepted_entry_does_not_count(self, unit_env, status):
        service = await unit_env.get(FriendRequestService)
        friends = [FriendEntry(id="u2", status=status)]

        assert service.are_already_friends(U1, U2, friends) is False

    @pytest.mark.asyncio
    async def test_other_friend_does_not_count(self, unit_env):
        service = await unit_env.get(FriendRequestService)
        friends = [FriendEntry(id="u3", status="accepted")]

        assert service.are_already_friends(U1, U2, friends) is False
        assert service.are_already_friends(U1, U2, []) is False


class TestUpdateFriendRequestStatus:
    """Tests for update_friend_request_status method."""

    @pytest.mark.asyncio
    async def test_accept_pending_request(self, unit_env):
        service = await unit_env.get(FriendRequestService)
        clock = await unit_env.get(FixedClock)
        request = await service.create_friend_request(U1, "Alice", U2, "Bob")
        clock.advance(minutes=3)

        updated = await service.update_friend_request_status(
            request.id, FriendRequestStatus.ACCEPTED
        )

        assert updated.status == FriendRequestStatus.ACCEPTED
        assert updated.responded_at == clock.now()
        assert await service.find_existing_request(U1, U2) is None

    @pytest.mark.asyncio
    async def test_terminal_status_is_not_overwritten(self, unit_env):
        service = await unit_env.get(FriendRequestService)
        request = await service.create_friend_request(U1, "Alice", U2, "Bob")
        accepted = await service.update_friend_request_status(
            request.id, FriendRequestStatus.ACCEPTED
        )

        result = await service.update_friend_request_status(
            request.id, FriendRequestStatus.DECLINED
        )

        assert result == accepted
        assert result.status == FriendRequestStatus.ACCEPTED

    @pytest.mark.asyncio
    async def test_unknown_id_returns_none(self, unit_env):
        service = await unit_env.get(FriendRequestService)

        result = await service.update_friend_request_status(
            FriendRequestId("freq_missing"), FriendRequestStatus.ACCEPTED
        )

        assert result is None

    @pytest.mark.asyncio
    async def test_pending_is_not_a_valid_target(self, unit_env):
        service = await unit_env.get(FriendRequestService)
        request = await service.create_friend_request(U1, "Alice", U2, "Bob")

        with pytest.raises(ValidationError):
            await service.update_friend_request_status(
                request.id, FriendRequestStatus.PENDING
            )


class TestListing:
    """Tests for pending request listings."""

    @pytest.mark.asyncio
    async def test_pending_requests_for_recipient(self, unit_env):
        service = await unit_env.get(FriendRequestService)
        to_u2 = await service.create_friend_request(U1, "Alice", U2, "Bob")
        answered = await service.create_friend_request(U3, "Carol", U2, "Bob")
        await service.update_friend_request_status(
            answered.id, FriendRequestStatus.DECLINED
        )
        await service.create_friend_request(U2, "Bob", UserId("u4"), "Dave")

        pending = await service.get_pending_requests_for_user(U2)
        sent = await service.get_sent_requests(U2)

        assert pending == [to_u2]
        assert [req.to_user_id for req in sent] == ["u4"]
