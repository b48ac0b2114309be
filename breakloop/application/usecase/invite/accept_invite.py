"""Accept invite use case.

Opening an invite link turns into a friend request from the invitee to the
inviter. The steps are separate writes to separate collections:

1. validate the token
2. reject an inviter opening their own invite
3. create the friend request (invitee -> inviter)
4. emit the friend request update for the inviter's inbox
5. mark the invite used
"""

import logfire
from pydantic import BaseModel

from breakloop.application.usecase.base import BaseUseCase
from breakloop.domain.service import (
    EventUpdateService,
    FriendRequestService,
    InviteService,
)
from breakloop.domain.value import InviteRejection, UserId


class AcceptInviteRequest(BaseModel):
    """Accept invite request."""

    token: str | None = None
    user_id: str
    user_name: str


class AcceptInviteResponse(BaseModel):
    """Accept invite response."""

    accepted: bool
    reason: InviteRejection | None = None
    message: str | None = None
    friend_request_id: str | None = None
    inviter_id: str | None = None
    inviter_name: str | None = None


class AcceptInviteUseCase(BaseUseCase):
    """Use case for redeeming an invite link."""

    def __init__(
        self,
        invite_service: InviteService,
        friend_request_service: FriendRequestService,
        event_update_service: EventUpdateService,
    ) -> None:
        """Initialize accept invite use case.

        Args:
            invite_service: Invite domain service
            friend_request_service: Friend request domain service
            event_update_service: Event update bus
        """
        self.invite_service = invite_service
        self.friend_request_service = friend_request_service
        self.event_update_service = event_update_service

    async def execute(self, request: AcceptInviteRequest) -> AcceptInviteResponse:
        """Redeem an invite.

        Args:
            request: Token and the redeeming user

        Returns:
            Outcome with the friend request, or the rejection reason
        """
        with logfire.span("accept_invite.execute", user_id=request.user_id):
            validation = await self.invite_service.validate_invite(request.token)
            if not validation.valid:
                return AcceptInviteResponse(
                    accepted=False,
                    reason=validation.reason,
                    message=validation.message,
                )

            invite = validation.invite
            user_id = UserId(request.user_id)
            if invite.from_user_id == user_id:
                logfire.warn("Self-invite rejected", invite_id=invite.id)
                return AcceptInviteResponse(
                    accepted=False,
                    reason=InviteRejection.OWN_INVITE,
                    message=InviteRejection.OWN_INVITE.message,
                )

            (
                friend_request,
                created,
            ) = await self.friend_request_service.create_friend_request_if_absent(
                from_user_id=user_id,
                from_user_name=request.user_name,
                to_user_id=invite.from_user_id,
                to_user_name=invite.from_user_name,
            )
            # An existing pending request is already in the inviter's inbox
            if created:
                await self.event_update_service.emit_friend_request_update(
                    friend_request.id, user_id, request.user_name
                )

            await self.invite_service.mark_invite_as_used(invite.token.root, user_id)

            logfire.info(
                "Invite accepted",
                invite_id=invite.id,
                friend_request_id=friend_request.id,
            )
            return AcceptInviteResponse(
                accepted=True,
                message=f"Friend request sent to {invite.from_user_name}",
                friend_request_id=friend_request.id,
                inviter_id=invite.from_user_id,
                inviter_name=invite.from_user_name,
            )
