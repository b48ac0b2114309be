"""Send friend request use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from breakloop.application.usecase.base import BaseUseCase
from breakloop.application.usecase.friend.check_eligibility import (
    CheckEligibilityRequest,
    CheckEligibilityUseCase,
)
from breakloop.domain.service import EventUpdateService, FriendRequestService
from breakloop.domain.value import FriendEntry, IneligibilityReason, UserId


class SendFriendRequestRequest(BaseModel):
    """Send friend request request."""

    from_user_id: str
    from_user_name: str
    to_user_id: str
    to_user_name: str
    friends: list[FriendEntry] = Field(default_factory=list)


class SendFriendRequestResponse(BaseModel):
    """Send friend request response."""

    sent: bool
    reason: IneligibilityReason | None = None
    request_id: str | None = None
    created_at: datetime | None = None


class SendFriendRequestUseCase(BaseUseCase):
    """Use case for sending a friend request after the eligibility check."""

    def __init__(
        self,
        friend_request_service: FriendRequestService,
        event_update_service: EventUpdateService,
    ) -> None:
        """Initialize send friend request use case.

        Args:
            friend_request_service: Friend request domain service
            event_update_service: Event update bus
        """
        self.friend_request_service = friend_request_service
        self.event_update_service = event_update_service
        self.eligibility = CheckEligibilityUseCase(friend_request_service)

    async def execute(
        self, request: SendFriendRequestRequest
    ) -> SendFriendRequestResponse:
        """Send the request and notify the recipient.

        Args:
            request: Sender, recipient and the sender's friend list

        Returns:
            The created request, or why it was not sent
        """
        eligibility = await self.eligibility.execute(
            CheckEligibilityRequest(
                user_id=request.from_user_id,
                target_user_id=request.to_user_id,
                friends=request.friends,
            )
        )
        if not eligibility.eligible:
            return SendFriendRequestResponse(sent=False, reason=eligibility.reason)

        (
            friend_request,
            created,
        ) = await self.friend_request_service.create_friend_request_if_absent(
            from_user_id=UserId(request.from_user_id),
            from_user_name=request.from_user_name,
            to_user_id=UserId(request.to_user_id),
            to_user_name=request.to_user_name,
        )
        # A request merged into a pending one already has its inbox update
        if created:
            await self.event_update_service.emit_friend_request_update(
                friend_request.id,
                friend_request.from_user_id,
                friend_request.from_user_name,
            )

        return SendFriendRequestResponse(
            sent=True,
            request_id=friend_request.id,
            created_at=friend_request.created_at,
        )
