"""Friend request domain service."""

from collections.abc import Iterable

import logfire

from breakloop.domain.error import BusinessRuleViolationError, ValidationError
from breakloop.domain.model.friend_request import FriendRequest
from breakloop.domain.repository import FriendRequestRepository
from breakloop.domain.value import (
    FriendEntry,
    FriendRequestId,
    FriendRequestStatus,
    UserId,
)
from breakloop.util.clock import Clock
from breakloop.util.tokens import generate_id

from .base import Service


class FriendRequestService(Service):
    """Domain service for pairwise friend requests."""

    def __init__(
        self, friend_request_repository: FriendRequestRepository, clock: Clock
    ) -> None:
        """Initialize friend request service.

        Args:
            friend_request_repository: Friend request repository
            clock: Source of the current time
        """
        self.friend_request_repository = friend_request_repository
        self.clock = clock

    async def create_friend_request(
        self,
        from_user_id: UserId,
        from_user_name: str,
        to_user_id: UserId,
        to_user_name: str,
    ) -> FriendRequest:
        """Create a pending friend request.

        If the pair already has a pending request, in either direction, that
        request is returned and nothing is written.

        Args:
            from_user_id: Sender ID
            from_user_name: Sender display name
            to_user_id: Recipient ID
            to_user_name: Recipient display name

        Returns:
            The new request, or the existing pending one for the pair

        Raises:
            BusinessRuleViolationError: If a user sends a request to themselves
        """
        request, _ = await self.create_friend_request_if_absent(
            from_user_id, from_user_name, to_user_id, to_user_name
        )
        return request

    async def create_friend_request_if_absent(
        self,
        from_user_id: UserId,
        from_user_name: str,
        to_user_id: UserId,
        to_user_name: str,
    ) -> tuple[FriendRequest, bool]:
        """Like ``create_friend_request``, also telling whether it was created.

        Returns:
            The stored request and True if this call wrote it, False if an
            existing pending request was returned

        Raises:
            BusinessRuleViolationError: If a user sends a request to themselves
        """
        with logfire.span(
            "friend_request_service.create_friend_request",
            from_user_id=str(from_user_id),
            to_user_id=str(to_user_id),
        ):
            if from_user_id == to_user_id:
                logfire.warn("Self friend request rejected", user_id=str(from_user_id))
                raise BusinessRuleViolationError("Cannot send a friend request to yourself")

            now = self.clock.now()
            request = FriendRequest(
                id=FriendRequestId(generate_id("freq", now)),
                from_user_id=from_user_id,
                from_user_name=from_user_name,
                to_user_id=to_user_id,
                to_user_name=to_user_name,
                status=FriendRequestStatus.PENDING,
                created_at=now,
            )

            stored = await self.friend_request_repository.add_unless_pending(request)
            created = stored.id == request.id
            if created:
                logfire.info("Friend request created", request_id=stored.id)
            else:
                logfire.info(
                    "Pending friend request already exists",
                    request_id=stored.id,
                    from_user_id=str(stored.from_user_id),
                    to_user_id=str(stored.to_user_id),
                )
            return stored, created

    async def get_friend_request(
        self, request_id: FriendRequestId
    ) -> FriendRequest | None:
        return await self.friend_request_repository.find_by_id(request_id)

    async def find_existing_request(
        self, user_id1: UserId, user_id2: UserId
    ) -> FriendRequest | None:
        """Find a pending request between two users, in either direction."""
        return await self.friend_request_repository.find_pending_between(
            user_id1, user_id2
        )

    def are_already_friends(
        self, user_id1: UserId, user_id2: UserId, friends_list: Iterable[FriendEntry]
    ) -> bool:
        """Check the externally supplied friend list of ``user_id1``.

        Args:
            user_id1: Owner of the friend list
            user_id2: Candidate friend
            friends_list: Friend entries of ``user_id1``

        Returns:
            True if ``user_id2`` is listed with status ``accepted``
        """
        return any(
            friend.id == user_id2 and friend.status == FriendRequestStatus.ACCEPTED
            for friend in friends_list
        )

    async def update_friend_request_status(
        self, request_id: FriendRequestId, new_status: FriendRequestStatus
    ) -> FriendRequest | None:
        """Move a pending request to ``accepted`` or ``declined``.

        A request that already left ``pending`` keeps its first terminal
        status; the call is logged and the stored request returned as is.

        Args:
            request_id: Request ID
            new_status: ``accepted`` or ``declined``

        Returns:
            The request after the call, or None if the id is unknown

        Raises:
            ValidationError: If ``new_status`` is not terminal
        """
        if new_status == FriendRequestStatus.PENDING:
            raise ValidationError("Friend requests can only be accepted or declined")

        with logfire.span(
            "friend_request_service.update_friend_request_status",
            request_id=request_id,
            new_status=new_status.value,
        ):

            def respond(request: FriendRequest) -> FriendRequest | None:
                if request.status != FriendRequestStatus.PENDING:
                    return None
                return request.model_copy(
                    update={"status": new_status, "responded_at": self.clock.now()}
                )

            updated = await self.friend_request_repository.update_by_id(
                request_id, respond
            )
            if updated:
                logfire.info(
                    "Friend request answered",
                    request_id=request_id,
                    status=new_status.value,
                )
                return updated

            current = await self.friend_request_repository.find_by_id(request_id)
            if current is None:
                logfire.warn("Friend request not found", request_id=request_id)
            else:
                logfire.warn(
                    "Friend request already answered",
                    request_id=request_id,
                    status=current.status.value,
                    requested_status=new_status.value,
                )
            return current

    async def get_pending_requests_for_user(self, user_id: UserId) -> list[FriendRequest]:
        """List pending requests addressed to a user."""
        with logfire.span(
            "friend_request_service.get_pending_requests_for_user",
            user_id=str(user_id),
        ):
            return await self.friend_request_repository.find_pending_for_recipient(
                user_id
            )

    async def get_sent_requests(self, user_id: UserId) -> list[FriendRequest]:
        """List pending requests a user has sent."""
        return await self.friend_request_repository.find_pending_from_sender(user_id)
