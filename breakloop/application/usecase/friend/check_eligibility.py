"""Friend request eligibility use case."""

import logfire
from pydantic import BaseModel, Field

from breakloop.application.usecase.base import BaseUseCase
from breakloop.domain.service import FriendRequestService
from breakloop.domain.value import FriendEntry, IneligibilityReason, UserId


class CheckEligibilityRequest(BaseModel):
    """Eligibility check request."""

    user_id: str
    target_user_id: str
    # Friend list of ``user_id``, owned by the external friend graph
    friends: list[FriendEntry] = Field(default_factory=list)


class CheckEligibilityResponse(BaseModel):
    """Eligibility check response."""

    eligible: bool
    reason: IneligibilityReason | None = None


class CheckEligibilityUseCase(BaseUseCase):
    """Decide whether ``user_id`` may send a friend request to a target.

    Checks, in order: not the user themselves, not already friends, no
    pending request in either direction. Any failure while checking
    answers "not eligible".
    """

    def __init__(self, friend_request_service: FriendRequestService) -> None:
        """Initialize eligibility use case.

        Args:
            friend_request_service: Friend request domain service
        """
        self.friend_request_service = friend_request_service

    async def execute(
        self, request: CheckEligibilityRequest
    ) -> CheckEligibilityResponse:
        user_id = UserId(request.user_id)
        target_id = UserId(request.target_user_id)

        if not target_id or user_id == target_id:
            return CheckEligibilityResponse(
                eligible=False, reason=IneligibilityReason.SELF
            )

        try:
            if self.friend_request_service.are_already_friends(
                user_id, target_id, request.friends
            ):
                return CheckEligibilityResponse(
                    eligible=False, reason=IneligibilityReason.ALREADY_FRIENDS
                )

            existing = await self.friend_request_service.find_existing_request(
                user_id, target_id
            )
        except Exception as e:
            # Fail closed
            logfire.warn(
                "Eligibility check failed",
                user_id=str(user_id),
                target_user_id=str(target_id),
                error=str(e),
            )
            return CheckEligibilityResponse(
                eligible=False, reason=IneligibilityReason.UNAVAILABLE
            )

        if existing:
            return CheckEligibilityResponse(
                eligible=False, reason=IneligibilityReason.REQUEST_PENDING
            )

        return CheckEligibilityResponse(eligible=True)
