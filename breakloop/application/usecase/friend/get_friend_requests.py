"""Get friend requests use case."""

from datetime import datetime

from pydantic import BaseModel

from breakloop.application.usecase.base import BaseUseCase
from breakloop.domain.model import FriendRequest
from breakloop.domain.service import FriendRequestService
from breakloop.domain.value import FriendRequestStatus, UserId


class FriendRequestItem(BaseModel):
    """Friend request item in response."""

    request_id: str
    from_user_id: str
    from_user_name: str
    to_user_id: str
    to_user_name: str
    status: FriendRequestStatus
    created_at: datetime

    @classmethod
    def from_domain(cls, request: FriendRequest) -> "FriendRequestItem":
        return cls(
            request_id=request.id,
            from_user_id=request.from_user_id,
            from_user_name=request.from_user_name,
            to_user_id=request.to_user_id,
            to_user_name=request.to_user_name,
            status=request.status,
            created_at=request.created_at,
        )


class GetFriendRequestsRequest(BaseModel):
    """Get friend requests request."""

    user_id: str


class GetFriendRequestsResponse(BaseModel):
    """Pending requests received and sent by the user."""

    received: list[FriendRequestItem]
    sent: list[FriendRequestItem]


class GetFriendRequestsUseCase(BaseUseCase):
    """Use case for listing a user's pending friend requests."""

    def __init__(self, friend_request_service: FriendRequestService) -> None:
        self.friend_request_service = friend_request_service

    async def execute(
        self, request: GetFriendRequestsRequest
    ) -> GetFriendRequestsResponse:
        user_id = UserId(request.user_id)
        received = await self.friend_request_service.get_pending_requests_for_user(
            user_id
        )
        sent = await self.friend_request_service.get_sent_requests(user_id)
        return GetFriendRequestsResponse(
            received=[FriendRequestItem.from_domain(req) for req in received],
            sent=[FriendRequestItem.from_domain(req) for req in sent],
        )
