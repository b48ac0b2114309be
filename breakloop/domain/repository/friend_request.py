"""Friend request repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from breakloop.domain.model.friend_request import FriendRequest
from breakloop.domain.value import FriendRequestId, UserId


class FriendRequestRepository(ABC):
    """Repository for FriendRequest entity."""

    @abstractmethod
    async def find_all(self) -> list[FriendRequest]:
        """Return every stored request in creation order."""
        pass

    @abstractmethod
    async def find_by_id(self, request_id: FriendRequestId) -> FriendRequest | None:
        """Find a request by ID."""
        pass

    @abstractmethod
    async def find_pending_between(
        self, user_id1: UserId, user_id2: UserId
    ) -> FriendRequest | None:
        """Find the first pending request between two users, in either direction."""
        pass

    @abstractmethod
    async def find_pending_for_recipient(self, user_id: UserId) -> list[FriendRequest]:
        """Find pending requests addressed to a user."""
        pass

    @abstractmethod
    async def find_pending_from_sender(self, user_id: UserId) -> list[FriendRequest]:
        """Find pending requests sent by a user."""
        pass

    @abstractmethod
    async def add_unless_pending(self, request: FriendRequest) -> FriendRequest:
        """Append a request unless the pair already has a pending one.

        The check and the append happen under one collection write, so two
        concurrent callers cannot both create a pending request for the
        same pair.

        Args:
            request: The new pending request

        Returns:
            The existing pending request for the pair, or ``request`` once stored
        """
        pass

    @abstractmethod
    async def update_by_id(
        self,
        request_id: FriendRequestId,
        change: Callable[[FriendRequest], FriendRequest | None],
    ) -> FriendRequest | None:
        """Atomically apply a change to a request.

        Returns:
            The replacement request, or None if not found or unchanged
        """
        pass
