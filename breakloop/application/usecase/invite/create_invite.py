"""Create invite use case."""

from datetime import datetime

from pydantic import BaseModel

from breakloop.application.usecase.base import BaseUseCase
from breakloop.domain.service import InviteService
from breakloop.domain.value import InviteStatus, UserId


class CreateInviteRequest(BaseModel):
    """Create invite request."""

    from_user_id: str
    from_user_name: str


class CreateInviteResponse(BaseModel):
    """Create invite response."""

    invite_id: str
    token: str
    link: str
    status: InviteStatus
    created_at: datetime


class CreateInviteUseCase(BaseUseCase):
    """Use case for creating a shareable invite link."""

    def __init__(self, invite_service: InviteService) -> None:
        """Initialize create invite use case.

        Args:
            invite_service: Invite domain service
        """
        self.invite_service = invite_service

    async def execute(self, request: CreateInviteRequest) -> CreateInviteResponse:
        """Create an invite and its link.

        Args:
            request: Create invite request

        Returns:
            The invite token and link to share
        """
        invite = await self.invite_service.create_invite(
            UserId(request.from_user_id), request.from_user_name
        )
        return CreateInviteResponse(
            invite_id=invite.id,
            token=invite.token.root,
            link=self.invite_service.generate_invite_link(invite.token.root),
            status=invite.status,
            created_at=invite.created_at,
        )
