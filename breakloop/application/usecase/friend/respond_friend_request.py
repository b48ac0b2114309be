"""Respond to friend request use case."""

import logfire
from pydantic import BaseModel

from breakloop.application.usecase.base import BaseUseCase
from breakloop.domain.error import BusinessRuleViolationError, NotFoundError
from breakloop.domain.service import FriendRequestService, InboxService
from breakloop.domain.value import FriendRequestId, FriendRequestStatus


class RespondFriendRequestRequest(BaseModel):
    """Respond to friend request request."""

    request_id: str
    user_id: str
    accept: bool


class RespondFriendRequestResponse(BaseModel):
    """Respond to friend request response."""

    request_id: str
    status: FriendRequestStatus
    from_user_id: str
    from_user_name: str


class RespondFriendRequestUseCase(BaseUseCase):
    """Use case for accepting or declining a friend request.

    Only the recipient may answer. Answering also clears the request's
    updates from the inbox.
    """

    def __init__(
        self,
        friend_request_service: FriendRequestService,
        inbox_service: InboxService,
    ) -> None:
        self.friend_request_service = friend_request_service
        self.inbox_service = inbox_service

    async def execute(
        self, request: RespondFriendRequestRequest
    ) -> RespondFriendRequestResponse:
        """Answer the request.

        Raises:
            NotFoundError: If the request does not exist
            BusinessRuleViolationError: If the user is not the recipient
        """
        request_id = FriendRequestId(request.request_id)
        existing = await self.friend_request_service.get_friend_request(request_id)
        if existing is None:
            raise NotFoundError("FriendRequest", request.request_id)
        if existing.to_user_id != request.user_id:
            logfire.warn(
                "Friend request answered by non-recipient",
                request_id=request.request_id,
                user_id=request.user_id,
            )
            raise BusinessRuleViolationError(
                "Only the recipient can answer a friend request"
            )

        status = (
            FriendRequestStatus.ACCEPTED
            if request.accept
            else FriendRequestStatus.DECLINED
        )
        friend_request = await self.friend_request_service.update_friend_request_status(
            request_id, status
        )
        if friend_request is None:
            raise NotFoundError("FriendRequest", request.request_id)

        await self.inbox_service.resolve_updates_by_event(request_id)

        return RespondFriendRequestResponse(
            request_id=friend_request.id,
            status=friend_request.status,
            from_user_id=friend_request.from_user_id,
            from_user_name=friend_request.from_user_name,
        )
