"""Unit tests for InviteService."""

import pytest

from breakloop.domain.repository import InviteRepository
from breakloop.domain.service import InviteService
from breakloop.domain.value import InviteRejection, InviteStatus, UserId
from breakloop.util.clock import FixedClock
from breakloop.util.tokens import TOKEN_ALPHABET
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

ALICE = UserId("user_alice")
BOB = UserId("user_bob")
CAROL = UserId("user_carol")


class TestCreateInvite:
    """Tests for create_invite method."""

    @pytest.mark.asyncio
    async def test_create_invite_success(self, unit_env):
        """Creating an invite should save an active invite with a fresh token."""
        # Arrange
        invite_service = await unit_env.get(InviteService)
        invite_repo = await unit_env.get(InviteRepository)
        clock = await unit_env.get(FixedClock)

        # Act
        invite = await invite_service.create_invite(ALICE, "Alice")

        # Assert
        assert invite.id.startswith("inv_")
        assert invite.status == InviteStatus.ACTIVE
        assert invite.from_user_id == ALICE
        assert invite.from_user_name == "Alice"
        assert invite.created_at == clock.now()
        assert invite.used_by_user_id is None
        assert invite.used_at is None

        token = invite.token.root
        assert len(token) == 24
        assert set(token) <= set(TOKEN_ALPHABET)

        saved = await invite_repo.find_by_token(invite.token)
        assert saved == invite

    @pytest.mark.asyncio
    async def test_tokens_are_unique(self, unit_env):
        """Every invite gets its own token and id."""
        invite_service = await unit_env.get(InviteService)

        invites = [await invite_service.create_invite(ALICE, "Alice") for _ in range(20)]

        assert len({invite.token.root for invite in invites}) == 20
        assert len({invite.id for invite in invites}) == 20


class TestValidateInvite:
    """Tests for validate_invite method."""

    @pytest.mark.asyncio
    async def test_valid_active_invite(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        invite = await invite_service.create_invite(ALICE, "Alice")

        result = await invite_service.validate_invite(invite.token.root)

        assert result.valid is True
        assert result.invite == invite
        assert result.reason is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, ""])
    async def test_missing_token(self, unit_env, token):
        invite_service = await unit_env.get(InviteService)

        result = await invite_service.validate_invite(token)

        assert result.valid is False
        assert result.reason == InviteRejection.NO_TOKEN
        assert result.message == "No invite token provided"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", ["doesnotexist", "not a valid token!"])
    async def test_unknown_token(self, unit_env, token):
        invite_service = await unit_env.get(InviteService)
        await invite_service.create_invite(ALICE, "Alice")

        result = await invite_service.validate_invite(token)

        assert result.valid is False
        assert result.reason == InviteRejection.NOT_FOUND
        assert result.message == "Invite not found"

    @pytest.mark.asyncio
    async def test_expired_invite(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        invite = await invite_service.create_invite(ALICE, "Alice")
        await invite_service.expire_invite(invite.token.root)

        result = await invite_service.validate_invite(invite.token.root)

        assert result.valid is False
        assert result.reason == InviteRejection.EXPIRED
        assert result.message == "This invite has expired"

    @pytest.mark.asyncio
    async def test_validation_never_mutates(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        invite_repo = await unit_env.get(InviteRepository)
        invite = await invite_service.create_invite(ALICE, "Alice")

        for _ in range(3):
            await invite_service.validate_invite(invite.token.root)

        assert await invite_repo.find_all() == [invite]


class TestMarkInviteAsUsed:
    """Tests for mark_invite_as_used method."""

    @pytest.mark.asyncio
    async def test_create_validate_use_validate(self, unit_env):
        """Invite is valid until used, then reports already used."""
        # Arrange
        invite_service = await unit_env.get(InviteService)
        clock = await unit_env.get(FixedClock)
        invite = await invite_service.create_invite(ALICE, "Alice")
        token = invite.token.root
        assert (await invite_service.validate_invite(token)).valid is True

        # Act
        clock.advance(minutes=5)
        used = await invite_service.mark_invite_as_used(token, BOB)

        # Assert
        assert used is not None
        assert used.status == InviteStatus.USED
        assert used.used_by_user_id == BOB
        assert used.used_at == clock.now()

        result = await invite_service.validate_invite(token)
        assert result.valid is False
        assert result.reason == InviteRejection.ALREADY_USED
        assert result.message == "This invite is no longer valid"

    @pytest.mark.asyncio
    async def test_second_use_keeps_first_values(self, unit_env):
        """A second mark must not overwrite used_at or used_by_user_id."""
        invite_service = await unit_env.get(InviteService)
        clock = await unit_env.get(FixedClock)
        invite = await invite_service.create_invite(ALICE, "Alice")
        token = invite.token.root

        first = await invite_service.mark_invite_as_used(token, BOB)
        clock.advance(hours=1)
        second = await invite_service.mark_invite_as_used(token, CAROL)

        assert second is None
        stored = await invite_service.find_invite_by_token(token)
        assert stored.used_by_user_id == BOB
        assert stored.used_at == first.used_at

    @pytest.mark.asyncio
    async def test_unknown_token_is_silent_noop(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        invite_repo = await unit_env.get(InviteRepository)

        result = await invite_service.mark_invite_as_used("missingtoken", BOB)

        assert result is None
        assert await invite_repo.find_all() == []

    @pytest.mark.asyncio
    async def test_inviter_cannot_use_own_invite(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        invite = await invite_service.create_invite(ALICE, "Alice")

        result = await invite_service.mark_invite_as_used(invite.token.root, ALICE)

        assert result is None
        stored = await invite_service.find_invite_by_token(invite.token.root)
        assert stored.status == InviteStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_expired_invite_cannot_be_used(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        invite = await invite_service.create_invite(ALICE, "Alice")
        await invite_service.expire_invite(invite.token.root)

        result = await invite_service.mark_invite_as_used(invite.token.root, BOB)

        assert result is None
        stored = await invite_service.find_invite_by_token(invite.token.root)
        assert stored.status == InviteStatus.EXPIRED


class TestExpireInvite:
    """Tests for expire_invite method."""

    @pytest.mark.asyncio
    async def test_expire_active_invite(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        invite = await invite_service.create_invite(ALICE, "Alice")

        expired = await invite_service.expire_invite(invite.token.root)

        assert expired.status == InviteStatus.EXPIRED

    @pytest.mark.asyncio
    async def test_used_invite_stays_used(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        invite = await invite_service.create_invite(ALICE, "Alice")
        await invite_service.mark_invite_as_used(invite.token.root, BOB)

        result = await invite_service.expire_invite(invite.token.root)

        assert result is None
        stored = await invite_service.find_invite_by_token(invite.token.root)
        assert stored.status == InviteStatus.USED


class TestInviteLinksAndListing:
    """Tests for generate_invite_link and get_user_invites."""

    @pytest.mark.asyncio
    async def test_generate_invite_link(self, unit_env):
        invite_service = await unit_env.get(InviteService)

        link = invite_service.generate_invite_link("abc123")

        assert link == "https://breakloop.app/invite/abc123"
        assert link == invite_service.generate_invite_link("abc123")

    @pytest.mark.asyncio
    async def test_get_user_invites_newest_first(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        clock = await unit_env.get(FixedClock)

        first = await invite_service.create_invite(ALICE, "Alice")
        clock.advance(minutes=1)
        second = await invite_service.create_invite(ALICE, "Alice")
        await invite_service.create_invite(BOB, "Bob")

        invites = await invite_service.get_user_invites(ALICE)

        assert [invite.id for invite in invites] == [second.id, first.id]
