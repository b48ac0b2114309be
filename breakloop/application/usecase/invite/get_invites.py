"""Get invites use case."""

from datetime import datetime

from pydantic import BaseModel

from breakloop.application.usecase.base import BaseUseCase
from breakloop.domain.service import InviteService
from breakloop.domain.value import InviteStatus, UserId


class InviteItem(BaseModel):
    """Invite item in response."""

    invite_id: str
    token: str
    link: str
    status: InviteStatus
    created_at: datetime
    used_by_user_id: str | None = None
    used_at: datetime | None = None


class GetInvitesRequest(BaseModel):
    """Get invites request."""

    user_id: str


class GetInvitesResponse(BaseModel):
    """Get invites response."""

    invites: list[InviteItem]
    total: int


class GetInvitesUseCase(BaseUseCase):
    """Use case for listing the invites a user created."""

    def __init__(self, invite_service: InviteService) -> None:
        self.invite_service = invite_service

    async def execute(self, request: GetInvitesRequest) -> GetInvitesResponse:
        invites = await self.invite_service.get_user_invites(UserId(request.user_id))
        items = [
            InviteItem(
                invite_id=invite.id,
                token=invite.token.root,
                link=self.invite_service.generate_invite_link(invite.token.root),
                status=invite.status,
                created_at=invite.created_at,
                used_by_user_id=invite.used_by_user_id,
                used_at=invite.used_at,
            )
            for invite in invites
        ]
        return GetInvitesResponse(invites=items, total=len(items))
