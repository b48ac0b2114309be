"""Invite domain service."""

import logfire
from pydantic import ValidationError

from breakloop.config import InviteSettings
from breakloop.domain.model.invite import Invite, InviteValidation
from breakloop.domain.repository import InviteRepository
from breakloop.domain.value import (
    InviteId,
    InviteRejection,
    InviteStatus,
    InviteToken,
    UserId,
)
from breakloop.util.clock import Clock
from breakloop.util.tokens import generate_id, generate_token

from .base import Service


def _redact(token: str | None) -> str:
    return (token or "")[:8] + "..."


class InviteService(Service):
    """Domain service for the invite ledger."""

    def __init__(
        self,
        invite_repository: InviteRepository,
        clock: Clock,
        invite_settings: InviteSettings,
    ) -> None:
        """Initialize invite service.

        Args:
            invite_repository: Invite repository
            clock: Source of the current time
            invite_settings: Link and token configuration
        """
        self.invite_repository = invite_repository
        self.clock = clock
        self.settings = invite_settings

    async def create_invite(self, from_user_id: UserId, from_user_name: str) -> Invite:
        """Create a new active invite with a fresh token.

        Args:
            from_user_id: User creating the invite
            from_user_name: Display name of that user

        Returns:
            Created invite
        """
        with logfire.span(
            "invite_service.create_invite", from_user_id=str(from_user_id)
        ):
            now = self.clock.now()
            invite = Invite(
                id=InviteId(generate_id("inv", now)),
                token=InviteToken(generate_token(self.settings.token_length)),
                from_user_id=from_user_id,
                from_user_name=from_user_name,
                created_at=now,
                status=InviteStatus.ACTIVE,
            )

            saved = await self.invite_repository.add(invite)
            logfire.info(
                "Invite created",
                invite_id=saved.id,
                from_user_id=str(from_user_id),
            )
            return saved

    async def find_invite_by_token(self, token: str) -> Invite | None:
        """Get invite by token.

        Args:
            token: Invite token as it appears in the link

        Returns:
            Invite if found, None otherwise
        """
        try:
            invite_token = InviteToken(token)
        except ValidationError:
            # A malformed token can never match a stored one
            return None
        return await self.invite_repository.find_by_token(invite_token)

    async def validate_invite(self, token: str | None) -> InviteValidation:
        """Check whether a token can be redeemed. Never mutates state.

        Checks run in order: missing token, unknown token, used, expired.

        Args:
            token: Invite token, possibly missing

        Returns:
            Validation outcome with the invite or a rejection reason
        """
        with logfire.span("invite_service.validate_invite", token=_redact(token)):
            if not token:
                return InviteValidation(valid=False, reason=InviteRejection.NO_TOKEN)

            invite = await self.find_invite_by_token(token)
            if not invite:
                logfire.info("Invite not found", token=_redact(token))
                return InviteValidation(valid=False, reason=InviteRejection.NOT_FOUND)

            if invite.status == InviteStatus.USED:
                logfire.info(
                    "Invite already used",
                    invite_id=invite.id,
                    used_at=invite.used_at,
                )
                return InviteValidation(
                    valid=False, invite=invite, reason=InviteRejection.ALREADY_USED
                )

            if invite.status == InviteStatus.EXPIRED:
                return InviteValidation(
                    valid=False, invite=invite, reason=InviteRejection.EXPIRED
                )

            return InviteValidation(valid=True, invite=invite)

    async def mark_invite_as_used(
        self, token: str, used_by_user_id: UserId
    ) -> Invite | None:
        """Mark an active invite as used.

        Silently does nothing when the token is unknown, the invite is
        already terminal, or the inviter is redeeming their own invite.
        Call ``validate_invite`` first to surface the reason.

        Args:
            token: Invite token
            used_by_user_id: User redeeming the invite

        Returns:
            The used invite, or None if nothing changed
        """
        with logfire.span(
            "invite_service.mark_invite_as_used",
            token=_redact(token),
            used_by_user_id=str(used_by_user_id),
        ):
            try:
                invite_token = InviteToken(token)
            except ValidationError:
                logfire.warn("Malformed invite token", token=_redact(token))
                return None

            def use(invite: Invite) -> Invite | None:
                if invite.status.is_terminal:
                    logfire.warn(
                        "Invite already terminal",
                        invite_id=invite.id,
                        status=invite.status.value,
                    )
                    return None
                if invite.from_user_id == used_by_user_id:
                    logfire.warn("Inviter tried to use own invite", invite_id=invite.id)
                    return None
                return invite.model_copy(
                    update={
                        "status": InviteStatus.USED,
                        "used_by_user_id": used_by_user_id,
                        "used_at": self.clock.now(),
                    }
                )

            used = await self.invite_repository.update_by_token(invite_token, use)
            if used:
                logfire.info(
                    "Invite used",
                    invite_id=used.id,
                    used_by_user_id=str(used_by_user_id),
                )
            return used

    async def expire_invite(self, token: str) -> Invite | None:
        """Move an active invite to ``expired``.

        Args:
            token: Invite token

        Returns:
            The expired invite, or None if unknown or already terminal
        """
        with logfire.span("invite_service.expire_invite", token=_redact(token)):
            try:
                invite_token = InviteToken(token)
            except ValidationError:
                return None

            def expire(invite: Invite) -> Invite | None:
                if invite.status.is_terminal:
                    return None
                return invite.model_copy(update={"status": InviteStatus.EXPIRED})

            expired = await self.invite_repository.update_by_token(invite_token, expire)
            if expired:
                logfire.info("Invite expired", invite_id=expired.id)
            return expired

    def generate_invite_link(self, token: str) -> str:
        """Format the shareable link for a token."""
        return f"{self.settings.base_url.rstrip('/')}/invite/{token}"

    async def get_user_invites(self, user_id: UserId) -> list[Invite]:
        """List invites created by a user, newest first.

        Args:
            user_id: Inviter ID

        Returns:
            List of invites
        """
        with logfire.span("invite_service.get_user_invites", user_id=str(user_id)):
            invites = await self.invite_repository.find_by_inviter(user_id)
            logfire.info("Invites listed", user_id=str(user_id), count=len(invites))
            return invites
