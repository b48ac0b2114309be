"""Invite use cases."""

from breakloop.application.usecase.invite.accept_invite import (
    AcceptInviteRequest,
    AcceptInviteResponse,
    AcceptInviteUseCase,
)
from breakloop.application.usecase.invite.create_invite import (
    CreateInviteRequest,
    CreateInviteResponse,
    CreateInviteUseCase,
)
from breakloop.application.usecase.invite.expire_invite import (
    ExpireInviteRequest,
    ExpireInviteResponse,
    ExpireInviteUseCase,
)
from breakloop.application.usecase.invite.get_invites import (
    GetInvitesRequest,
    GetInvitesResponse,
    GetInvitesUseCase,
    InviteItem,
)
from breakloop.application.usecase.invite.validate_invite import (
    ValidateInviteRequest,
    ValidateInviteResponse,
    ValidateInviteUseCase,
)

__all__ = [
    "AcceptInviteRequest",
    "AcceptInviteResponse",
    "AcceptInviteUseCase",
    "CreateInviteRequest",
    "CreateInviteResponse",
    "CreateInviteUseCase",
    "ExpireInviteRequest",
    "ExpireInviteResponse",
    "ExpireInviteUseCase",
    "GetInvitesRequest",
    "GetInvitesResponse",
    "GetInvitesUseCase",
    "InviteItem",
    "ValidateInviteRequest",
    "ValidateInviteResponse",
    "ValidateInviteUseCase",
]
