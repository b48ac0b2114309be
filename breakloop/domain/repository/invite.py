"""Invite repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from breakloop.domain.model.invite import Invite
from breakloop.domain.value import InviteToken, UserId


class InviteRepository(ABC):
    """Repository for Invite entity.

    Defines the contract for invite persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_all(self) -> list[Invite]:
        """Return every stored invite in creation order."""
        pass

    @abstractmethod
    async def find_by_token(self, token: InviteToken) -> Invite | None:
        """Find an invite by token.

        Used when a user opens an invite link.

        Args:
            token: The invite token

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_inviter(self, inviter_id: UserId) -> list[Invite]:
        """Find all invites created by a user, newest first.

        Args:
            inviter_id: The inviter's ID

        Returns:
            List of invites
        """
        pass

    @abstractmethod
    async def add(self, invite: Invite) -> Invite:
        """Append a new invite.

        Args:
            invite: The invite to store

        Returns:
            The stored invite
        """
        pass

    @abstractmethod
    async def update_by_token(
        self, token: InviteToken, change: Callable[[Invite], Invite | None]
    ) -> Invite | None:
        """Atomically apply a change to the invite holding ``token``.

        ``change`` receives the current invite and returns its replacement,
        or None to leave the collection untouched.

        Args:
            token: The invite token
            change: Transition to apply

        Returns:
            The replacement invite, or None if not found or unchanged
        """
        pass
