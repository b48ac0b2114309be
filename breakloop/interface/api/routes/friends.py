"""Friend request routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from breakloop.application.usecase.friend import (
    CheckEligibilityRequest,
    CheckEligibilityResponse,
    CheckEligibilityUseCase,
    GetFriendRequestsRequest,
    GetFriendRequestsResponse,
    GetFriendRequestsUseCase,
    RespondFriendRequestRequest,
    RespondFriendRequestResponse,
    RespondFriendRequestUseCase,
    SendFriendRequestRequest,
    SendFriendRequestResponse,
    SendFriendRequestUseCase,
)
from breakloop.domain.value import FriendEntry
from breakloop.interface.api.identity import Actor, get_actor

router = APIRouter(prefix="/friends", tags=["friends"], route_class=DishkaRoute)


class EligibilityAPIRequest(BaseModel):
    """API request for an eligibility check."""

    target_user_id: str
    # The acting user's current friend list
    friends: list[FriendEntry] = Field(default_factory=list)


class SendFriendRequestAPIRequest(BaseModel):
    """API request for sending a friend request."""

    to_user_id: str = Field(min_length=1)
    to_user_name: str
    friends: list[FriendEntry] = Field(default_factory=list)


@router.post("/eligibility", response_model=CheckEligibilityResponse)
async def check_eligibility(
    request: EligibilityAPIRequest,
    check_eligibility_use_case: FromDishka[CheckEligibilityUseCase],
    actor: Actor = Depends(get_actor),
) -> CheckEligibilityResponse:
    """Check whether the acting user may send a friend request."""
    return await check_eligibility_use_case.execute(
        CheckEligibilityRequest(
            user_id=actor.user_id,
            target_user_id=request.target_user_id,
            friends=request.friends,
        )
    )


@router.post("/requests", response_model=SendFriendRequestResponse)
async def send_friend_request(
    request: SendFriendRequestAPIRequest,
    response: Response,
    send_friend_request_use_case: FromDishka[SendFriendRequestUseCase],
    actor: Actor = Depends(get_actor),
) -> SendFriendRequestResponse:
    """Send a friend request.

    Args:
        request: Recipient and the acting user's friend list
        response: Outgoing response, for the status code
        send_friend_request_use_case: Send friend request use case from DI
        actor: Acting user

    Returns:
        201 with the request when sent, 200 with the reason when not eligible
    """
    result = await send_friend_request_use_case.execute(
        SendFriendRequestRequest(
            from_user_id=actor.user_id,
            from_user_name=actor.user_name,
            to_user_id=request.to_user_id,
            to_user_name=request.to_user_name,
            friends=request.friends,
        )
    )
    if result.sent:
        response.status_code = status.HTTP_201_CREATED
    return result


@router.get("/requests", response_model=GetFriendRequestsResponse)
async def get_friend_requests(
    get_friend_requests_use_case: FromDishka[GetFriendRequestsUseCase],
    actor: Actor = Depends(get_actor),
) -> GetFriendRequestsResponse:
    """List pending requests received and sent by the acting user."""
    return await get_friend_requests_use_case.execute(
        GetFriendRequestsRequest(user_id=actor.user_id)
    )


@router.post("/requests/{request_id}/accept", response_model=RespondFriendRequestResponse)
async def accept_friend_request(
    request_id: str,
    respond_friend_request_use_case: FromDishka[RespondFriendRequestUseCase],
    actor: Actor = Depends(get_actor),
) -> RespondFriendRequestResponse:
    """Accept a friend request addressed to the acting user.

    Unknown ids answer 404. Anyone but the recipient gets 400.
    """
    return await respond_friend_request_use_case.execute(
        RespondFriendRequestRequest(
            request_id=request_id, user_id=actor.user_id, accept=True
        )
    )


@router.post(
    "/requests/{request_id}/decline", response_model=RespondFriendRequestResponse
)
async def decline_friend_request(
    request_id: str,
    respond_friend_request_use_case: FromDishka[RespondFriendRequestUseCase],
    actor: Actor = Depends(get_actor),
) -> RespondFriendRequestResponse:
    """Decline a friend request addressed to the acting user.

    Unknown ids answer 404. Anyone but the recipient gets 400.
    """
    return await respond_friend_request_use_case.execute(
        RespondFriendRequestRequest(
            request_id=request_id, user_id=actor.user_id, accept=False
        )
    )
