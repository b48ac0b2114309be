"""Expire invite use case."""

from pydantic import BaseModel

from breakloop.application.usecase.base import BaseUseCase
from breakloop.domain.error import BusinessRuleViolationError, NotFoundError
from breakloop.domain.service import InviteService
from breakloop.domain.value import InviteStatus


class ExpireInviteRequest(BaseModel):
    """Expire invite request."""

    token: str
    user_id: str


class ExpireInviteResponse(BaseModel):
    """Expire invite response.

    ``expired`` is False when the invite was already used or expired;
    ``status`` is the invite status after the call.
    """

    invite_id: str
    expired: bool
    status: InviteStatus


class ExpireInviteUseCase(BaseUseCase):
    """Use case for the inviter withdrawing an unused invite."""

    def __init__(self, invite_service: InviteService) -> None:
        """Initialize expire invite use case.

        Args:
            invite_service: Invite domain service
        """
        self.invite_service = invite_service

    async def execute(self, request: ExpireInviteRequest) -> ExpireInviteResponse:
        """Expire the invite if it is still active.

        Raises:
            NotFoundError: If the token is unknown
            BusinessRuleViolationError: If the user did not create the invite
        """
        invite = await self.invite_service.find_invite_by_token(request.token)
        if invite is None:
            raise NotFoundError("Invite", request.token[:8])

        if invite.from_user_id != request.user_id:
            raise BusinessRuleViolationError("Only the inviter can expire an invite")

        expired = await self.invite_service.expire_invite(request.token)
        if expired is None:
            return ExpireInviteResponse(
                invite_id=invite.id, expired=False, status=invite.status
            )

        return ExpireInviteResponse(
            invite_id=expired.id, expired=True, status=expired.status
        )
