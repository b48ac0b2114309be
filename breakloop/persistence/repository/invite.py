"""Key-value implementation of Invite repository."""

from collections.abc import Callable

from pydantic import TypeAdapter

from breakloop.domain.model import Invite
from breakloop.domain.repository import InviteRepository
from breakloop.domain.value import InviteToken, UserId
from breakloop.persistence.repository.base import KeyValueCollection
from breakloop.persistence.store import KeyValueStore


class KeyValueInviteRepository(KeyValueCollection[list[Invite]], InviteRepository):
    """Invites stored as one JSON array."""

    def __init__(self, store: KeyValueStore, key: str) -> None:
        super().__init__(store, key, TypeAdapter(list[Invite]), list)

    async def find_all(self) -> list[Invite]:
        return await self._read()

    async def find_by_token(self, token: InviteToken) -> Invite | None:
        for invite in await self._read():
            if invite.token == token:
                return invite
        return None

    async def find_by_inviter(self, inviter_id: UserId) -> list[Invite]:
        matches = [inv for inv in await self._read() if inv.from_user_id == inviter_id]
        matches.sort(key=lambda inv: inv.created_at, reverse=True)
        return matches

    async def add(self, invite: Invite) -> Invite:
        def change(invites: list[Invite]):
            return [*invites, invite], invite

        return await self._modify(change)

    async def update_by_token(
        self, token: InviteToken, change: Callable[[Invite], Invite | None]
    ) -> Invite | None:
        def apply(invites: list[Invite]):
            for i, invite in enumerate(invites):
                if invite.token == token:
                    replacement = change(invite)
                    if replacement is None:
                        return None, None
                    return [*invites[:i], replacement, *invites[i + 1 :]], replacement
            return None, None

        return await self._modify(apply)
