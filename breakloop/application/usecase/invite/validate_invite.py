"""Validate invite use case."""

import logfire
from pydantic import BaseModel

from breakloop.application.usecase.base import BaseUseCase
from breakloop.domain.service import InviteService
from breakloop.domain.value import InviteRejection, InviteStatus


class ValidateInviteRequest(BaseModel):
    """Validate invite request."""

    token: str | None = None
    # Acting user, when known, so an inviter opening their own link is told so
    user_id: str | None = None


class ValidateInviteResponse(BaseModel):
    """Validate invite response."""

    valid: bool
    reason: InviteRejection | None = None
    message: str | None = None
    status: InviteStatus | None = None
    from_user_id: str | None = None
    from_user_name: str | None = None


class ValidateInviteUseCase(BaseUseCase):
    """Use case for checking an invite link before acting on it."""

    def __init__(self, invite_service: InviteService) -> None:
        """Initialize validate invite use case.

        Args:
            invite_service: Invite domain service
        """
        self.invite_service = invite_service

    async def execute(self, request: ValidateInviteRequest) -> ValidateInviteResponse:
        """Validate an invite token.

        Args:
            request: Validation request with token

        Returns:
            Validation response with inviter details or a rejection reason
        """
        validation = await self.invite_service.validate_invite(request.token)
        invite = validation.invite

        if not validation.valid:
            return ValidateInviteResponse(
                valid=False,
                reason=validation.reason,
                message=validation.message,
                status=invite.status if invite else None,
            )

        if request.user_id and invite.from_user_id == request.user_id:
            logfire.info("Inviter opened own invite", invite_id=invite.id)
            return ValidateInviteResponse(
                valid=False,
                reason=InviteRejection.OWN_INVITE,
                message=InviteRejection.OWN_INVITE.message,
                status=invite.status,
            )

        return ValidateInviteResponse(
            valid=True,
            message="Valid invite",
            status=invite.status,
            from_user_id=invite.from_user_id,
            from_user_name=invite.from_user_name,
        )
