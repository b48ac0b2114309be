"""Invite routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Header, status

from breakloop.application.usecase.invite import (
    AcceptInviteRequest,
    AcceptInviteResponse,
    AcceptInviteUseCase,
    CreateInviteRequest,
    CreateInviteResponse,
    CreateInviteUseCase,
    ExpireInviteRequest,
    ExpireInviteResponse,
    ExpireInviteUseCase,
    GetInvitesRequest,
    GetInvitesResponse,
    GetInvitesUseCase,
    ValidateInviteRequest,
    ValidateInviteResponse,
    ValidateInviteUseCase,
)
from breakloop.interface.api.identity import Actor, get_actor

router = APIRouter(prefix="/invites", tags=["invites"], route_class=DishkaRoute)


@router.post(
    "", response_model=CreateInviteResponse, status_code=status.HTTP_201_CREATED
)
async def create_invite(
    create_invite_use_case: FromDishka[CreateInviteUseCase],
    actor: Actor = Depends(get_actor),
) -> CreateInviteResponse:
    """Create a shareable invite link for the acting user.

    Args:
        create_invite_use_case: Create invite use case from DI
        actor: Acting user

    Returns:
        Created invite with its token and link
    """
    return await create_invite_use_case.execute(
        CreateInviteRequest(from_user_id=actor.user_id, from_user_name=actor.user_name)
    )


@router.get("", response_model=GetInvitesResponse)
async def get_invites(
    get_invites_use_case: FromDishka[GetInvitesUseCase],
    actor: Actor = Depends(get_actor),
) -> GetInvitesResponse:
    """List invites created by the acting user, newest first."""
    return await get_invites_use_case.execute(GetInvitesRequest(user_id=actor.user_id))


@router.get("/{token}", response_model=ValidateInviteResponse)
async def validate_invite(
    token: str,
    validate_invite_use_case: FromDishka[ValidateInviteUseCase],
    x_user_id: str | None = Header(default=None),
) -> ValidateInviteResponse:
    """Check whether an invite can be redeemed.

    Identity is optional here; when given, opening one's own invite is
    reported as invalid.

    Args:
        token: Invite token from the link
        validate_invite_use_case: Validate invite use case from DI
        x_user_id: Optional acting user

    Returns:
        Validation outcome. Invalid invites are a normal response, not an error.
    """
    return await validate_invite_use_case.execute(
        ValidateInviteRequest(token=token, user_id=x_user_id)
    )


@router.post("/{token}/accept", response_model=AcceptInviteResponse)
async def accept_invite(
    token: str,
    accept_invite_use_case: FromDishka[AcceptInviteUseCase],
    actor: Actor = Depends(get_actor),
) -> AcceptInviteResponse:
    """Redeem an invite, sending a friend request to the inviter.

    Args:
        token: Invite token from the link
        accept_invite_use_case: Accept invite use case from DI
        actor: Acting user (the invitee)

    Returns:
        Outcome with the friend request id, or the rejection reason
    """
    return await accept_invite_use_case.execute(
        AcceptInviteRequest(
            token=token, user_id=actor.user_id, user_name=actor.user_name
        )
    )


@router.post("/{token}/expire", response_model=ExpireInviteResponse)
async def expire_invite(
    token: str,
    expire_invite_use_case: FromDishka[ExpireInviteUseCase],
    actor: Actor = Depends(get_actor),
) -> ExpireInviteResponse:
    """Withdraw an unused invite. Only its creator may do this."""
    return await expire_invite_use_case.execute(
        ExpireInviteRequest(token=token, user_id=actor.user_id)
    )
