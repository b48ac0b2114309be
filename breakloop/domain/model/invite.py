"""Invite entity.

Invites are single-use links a user shares to pull someone into their
friend graph. The token is the only identifier that leaves the system.
"""

from datetime import datetime

from breakloop.domain.model.common import DomainModel
from breakloop.domain.value import (
    InviteId,
    InviteRejection,
    InviteStatus,
    InviteToken,
    UserId,
)


class Invite(DomainModel):
    """Invite entity.

    Business rules:
    - Exactly one invite per token
    - Created ``active``; moves once to ``used`` or ``expired``
    - No mutation after a terminal state
    - An inviter cannot redeem their own invite
    """

    id: InviteId
    token: InviteToken
    from_user_id: UserId
    from_user_name: str
    created_at: datetime
    status: InviteStatus = InviteStatus.ACTIVE
    used_by_user_id: UserId | None = None
    used_at: datetime | None = None


class InviteValidation(DomainModel):
    """Outcome of checking an invite token.

    Either ``valid`` with the invite, or not valid with a reason.
    """

    valid: bool
    invite: Invite | None = None
    reason: InviteRejection | None = None

    @property
    def message(self) -> str | None:
        return self.reason.message if self.reason else None
