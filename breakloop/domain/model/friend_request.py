"""Friend request entity."""

from datetime import datetime

from breakloop.domain.model.common import DomainModel
from breakloop.domain.value import FriendRequestId, FriendRequestStatus, UserId


class FriendRequest(DomainModel):
    """Pairwise friend request.

    Business rules:
    - At most one pending request per unordered pair of users
    - Created ``pending``; moves once to ``accepted`` or ``declined``
    - Never deleted
    """

    id: FriendRequestId
    from_user_id: UserId
    from_user_name: str
    to_user_id: UserId
    to_user_name: str
    status: FriendRequestStatus = FriendRequestStatus.PENDING
    created_at: datetime
    responded_at: datetime | None = None

    def involves(self, user_id1: UserId, user_id2: UserId) -> bool:
        """Check whether this request links the two users, in either direction."""
        return {self.from_user_id, self.to_user_id} == {user_id1, user_id2}
