"""Strongly typed identifiers for Breakloop domain entities.

Identifiers are prefixed strings (``inv_…``, ``freq_…``) rather than UUIDs so
they stay stable across the JSON collections they are persisted in.
"""

from typing import NewType

UserId = NewType("UserId", str)
InviteId = NewType("InviteId", str)
FriendRequestId = NewType("FriendRequestId", str)
UpdateId = NewType("UpdateId", str)
ConversationId = NewType("ConversationId", str)
MessageId = NewType("MessageId", str)
