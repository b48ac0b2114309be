"""Friend request use cases."""

from breakloop.application.usecase.friend.check_eligibility import (
    CheckEligibilityRequest,
    CheckEligibilityResponse,
    CheckEligibilityUseCase,
)
from breakloop.application.usecase.friend.get_friend_requests import (
    FriendRequestItem,
    GetFriendRequestsRequest,
    GetFriendRequestsResponse,
    GetFriendRequestsUseCase,
)
from breakloop.application.usecase.friend.respond_friend_request import (
    RespondFriendRequestRequest,
    RespondFriendRequestResponse,
    RespondFriendRequestUseCase,
)
from breakloop.application.usecase.friend.send_friend_request import (
    SendFriendRequestRequest,
    SendFriendRequestResponse,
    SendFriendRequestUseCase,
)

__all__ = [
    "CheckEligibilityRequest",
    "CheckEligibilityResponse",
    "CheckEligibilityUseCase",
    "FriendRequestItem",
    "GetFriendRequestsRequest",
    "GetFriendRequestsResponse",
    "GetFriendRequestsUseCase",
    "RespondFriendRequestRequest",
    "RespondFriendRequestResponse",
    "RespondFriendRequestUseCase",
    "SendFriendRequestRequest",
    "SendFriendRequestResponse",
    "SendFriendRequestUseCase",
]
