"""Domain layer DI providers."""

from dishka import Scope, provide

from breakloop.config import ConversationSettings, InboxSettings, InviteSettings
from breakloop.domain.repository import (
    ConversationRepository,
    EventChatRepository,
    EventUpdateRepository,
    FriendRequestRepository,
    InviteRepository,
    LegacyChatRepository,
)
from breakloop.domain.service import (
    ConversationService,
    EventChatService,
    EventUpdateService,
    FriendRequestService,
    InboxService,
    InviteService,
)
from breakloop.util.clock import Clock
from breakloop.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped, matching the repositories they wrap.
    """

    scope = Scope.REQUEST

    @provide
    def get_invite_service(
        self,
        invite_repository: InviteRepository,
        clock: Clock,
        invite_settings: InviteSettings,
    ) -> InviteService:
        """Provide invite domain service."""
        return InviteService(
            invite_repository=invite_repository,
            clock=clock,
            invite_settings=invite_settings,
        )

    @provide
    def get_friend_request_service(
        self, friend_request_repository: FriendRequestRepository, clock: Clock
    ) -> FriendRequestService:
        """Provide friend request domain service."""
        return FriendRequestService(
            friend_request_repository=friend_request_repository, clock=clock
        )

    @provide
    def get_event_update_service(
        self,
        event_update_repository: EventUpdateRepository,
        clock: Clock,
        inbox_settings: InboxSettings,
    ) -> EventUpdateService:
        """Provide event update bus."""
        return EventUpdateService(
            event_update_repository=event_update_repository,
            clock=clock,
            inbox_settings=inbox_settings,
        )

    @provide
    def get_inbox_service(
        self, event_update_repository: EventUpdateRepository, clock: Clock
    ) -> InboxService:
        """Provide inbox domain service."""
        return InboxService(event_update_repository=event_update_repository, clock=clock)

    @provide
    def get_conversation_service(
        self,
        conversation_repository: ConversationRepository,
        legacy_chat_repository: LegacyChatRepository,
        clock: Clock,
        conversation_settings: ConversationSettings,
    ) -> ConversationService:
        """Provide conversation domain service."""
        return ConversationService(
            conversation_repository=conversation_repository,
            legacy_chat_repository=legacy_chat_repository,
            clock=clock,
            conversation_settings=conversation_settings,
        )

    @provide
    def get_event_chat_service(
        self, event_chat_repository: EventChatRepository, clock: Clock
    ) -> EventChatService:
        """Provide event chat domain service."""
        return EventChatService(
            event_chat_repository=event_chat_repository, clock=clock
        )
