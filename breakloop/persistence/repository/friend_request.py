"""Key-value implementation of FriendRequest repository."""

from collections.abc import Callable

from pydantic import TypeAdapter

from breakloop.domain.model import FriendRequest
from breakloop.domain.repository import FriendRequestRepository
from breakloop.domain.value import FriendRequestId, FriendRequestStatus, UserId
from breakloop.persistence.repository.base import KeyValueCollection
from breakloop.persistence.store import KeyValueStore


def _pending_between(
    requests: list[FriendRequest], user_id1: UserId, user_id2: UserId
) -> FriendRequest | None:
    for request in requests:
        if request.status == FriendRequestStatus.PENDING and request.involves(
            user_id1, user_id2
        ):
            return request
    return None


class KeyValueFriendRequestRepository(
    KeyValueCollection[list[FriendRequest]], FriendRequestRepository
):
    """Friend requests stored as one JSON array."""

    def __init__(self, store: KeyValueStore, key: str) -> None:
        super().__init__(store, key, TypeAdapter(list[FriendRequest]), list)

    async def find_all(self) -> list[FriendRequest]:
        return await self._read()

    async def find_by_id(self, request_id: FriendRequestId) -> FriendRequest | None:
        for request in await self._read():
            if request.id == request_id:
                return request
        return None

    async def find_pending_between(
        self, user_id1: UserId, user_id2: UserId
    ) -> FriendRequest | None:
        return _pending_between(await self._read(), user_id1, user_id2)

    async def find_pending_for_recipient(self, user_id: UserId) -> list[FriendRequest]:
        return [
            req
            for req in await self._read()
            if req.to_user_id == user_id and req.status == FriendRequestStatus.PENDING
        ]

    async def find_pending_from_sender(self, user_id: UserId) -> list[FriendRequest]:
        return [
            req
            for req in await self._read()
            if req.from_user_id == user_id
            and req.status == FriendRequestStatus.PENDING
        ]

    async def add_unless_pending(self, request: FriendRequest) -> FriendRequest:
        def change(requests: list[FriendRequest]):
            existing = _pending_between(
                requests, request.from_user_id, request.to_user_id
            )
            if existing is not None:
                return None, existing
            return [*requests, request], request

        return await self._modify(change)

    async def update_by_id(
        self,
        request_id: FriendRequestId,
        change: Callable[[FriendRequest], FriendRequest | None],
    ) -> FriendRequest | None:
        def apply(requests: list[FriendRequest]):
            for i, request in enumerate(requests):
                if request.id == request_id:
                    replacement = change(request)
                    if replacement is None:
                        return None, None
                    return [*requests[:i], replacement, *requests[i + 1 :]], replacement
            return None, None

        return await self._modify(apply)
