"""Inbox use cases."""

from breakloop.application.usecase.inbox.emit_update import (
    EmitUpdateRequest,
    EmitUpdateResponse,
    EmitUpdateUseCase,
)
from breakloop.application.usecase.inbox.get_badge_counts import (
    GetBadgeCountsRequest,
    GetBadgeCountsResponse,
    GetBadgeCountsUseCase,
)
from breakloop.application.usecase.inbox.get_inbox import (
    GetInboxRequest,
    GetInboxResponse,
    GetInboxUseCase,
    InboxItem,
)
from breakloop.application.usecase.inbox.resolve_updates import (
    ResolveUpdatesRequest,
    ResolveUpdatesResponse,
    ResolveUpdatesUseCase,
)

__all__ = [
    "EmitUpdateRequest",
    "EmitUpdateResponse",
    "EmitUpdateUseCase",
    "GetBadgeCountsRequest",
    "GetBadgeCountsResponse",
    "GetBadgeCountsUseCase",
    "GetInboxRequest",
    "GetInboxResponse",
    "GetInboxUseCase",
    "InboxItem",
    "ResolveUpdatesRequest",
    "ResolveUpdatesResponse",
    "ResolveUpdatesUseCase",
]
