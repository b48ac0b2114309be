"""Application layer DI providers."""

from dishka import Scope, provide

from breakloop.application.usecase.conversation import (
    ListConversationsUseCase,
    MigrateLegacyChatsUseCase,
    OpenConversationUseCase,
    SendMessageUseCase,
)
from breakloop.application.usecase.event_chat import (
    GetEventMessagesUseCase,
    PostEventMessageUseCase,
)
from breakloop.application.usecase.friend import (
    CheckEligibilityUseCase,
    GetFriendRequestsUseCase,
    RespondFriendRequestUseCase,
    SendFriendRequestUseCase,
)
from breakloop.application.usecase.inbox import (
    EmitUpdateUseCase,
    GetBadgeCountsUseCase,
    GetInboxUseCase,
    ResolveUpdatesUseCase,
)
from breakloop.application.usecase.invite import (
    AcceptInviteUseCase,
    CreateInviteUseCase,
    ExpireInviteUseCase,
    GetInvitesUseCase,
    ValidateInviteUseCase,
)
from breakloop.domain.service import (
    ConversationService,
    EventChatService,
    EventUpdateService,
    FriendRequestService,
    InboxService,
    InviteService,
)
from breakloop.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Invite use cases
    @provide
    def get_create_invite_use_case(
        self, invite_service: InviteService
    ) -> CreateInviteUseCase:
        """Provide create invite use case."""
        return CreateInviteUseCase(invite_service=invite_service)

    @provide
    def get_get_invites_use_case(self, invite_service: InviteService) -> GetInvitesUseCase:
        """Provide get invites use case."""
        return GetInvitesUseCase(invite_service=invite_service)

    @provide
    def get_validate_invite_use_case(
        self, invite_service: InviteService
    ) -> ValidateInviteUseCase:
        """Provide validate invite use case."""
        return ValidateInviteUseCase(invite_service=invite_service)

    @provide
    def get_expire_invite_use_case(
        self, invite_service: InviteService
    ) -> ExpireInviteUseCase:
        """Provide expire invite use case."""
        return ExpireInviteUseCase(invite_service=invite_service)

    @provide
    def get_accept_invite_use_case(
        self,
        invite_service: InviteService,
        friend_request_service: FriendRequestService,
        event_update_service: EventUpdateService,
    ) -> AcceptInviteUseCase:
        """Provide accept invite use case."""
        return AcceptInviteUseCase(
            invite_service=invite_service,
            friend_request_service=friend_request_service,
            event_update_service=event_update_service,
        )

    # Friend use cases
    @provide
    def get_check_eligibility_use_case(
        self, friend_request_service: FriendRequestService
    ) -> CheckEligibilityUseCase:
        """Provide friend request eligibility use case."""
        return CheckEligibilityUseCase(friend_request_service=friend_request_service)

    @provide
    def get_send_friend_request_use_case(
        self,
        friend_request_service: FriendRequestService,
        event_update_service: EventUpdateService,
    ) -> SendFriendRequestUseCase:
        """Provide send friend request use case."""
        return SendFriendRequestUseCase(
            friend_request_service=friend_request_service,
            event_update_service=event_update_service,
        )

    @provide
    def get_respond_friend_request_use_case(
        self,
        friend_request_service: FriendRequestService,
        inbox_service: InboxService,
    ) -> RespondFriendRequestUseCase:
        """Provide respond friend request use case."""
        return RespondFriendRequestUseCase(
            friend_request_service=friend_request_service,
            inbox_service=inbox_service,
        )

    @provide
    def get_get_friend_requests_use_case(
        self, friend_request_service: FriendRequestService
    ) -> GetFriendRequestsUseCase:
        """Provide get friend requests use case."""
        return GetFriendRequestsUseCase(friend_request_service=friend_request_service)

    # Inbox use cases
    @provide
    def get_get_inbox_use_case(self, inbox_service: InboxService) -> GetInboxUseCase:
        """Provide get inbox use case."""
        return GetInboxUseCase(inbox_service=inbox_service)

    @provide
    def get_get_badge_counts_use_case(
        self,
        inbox_service: InboxService,
        conversation_service: ConversationService,
    ) -> GetBadgeCountsUseCase:
        """Provide badge counts use case."""
        return GetBadgeCountsUseCase(
            inbox_service=inbox_service, conversation_service=conversation_service
        )

    @provide
    def get_resolve_updates_use_case(
        self, inbox_service: InboxService
    ) -> ResolveUpdatesUseCase:
        """Provide resolve updates use case."""
        return ResolveUpdatesUseCase(inbox_service=inbox_service)

    @provide
    def get_emit_update_use_case(
        self, event_update_service: EventUpdateService
    ) -> EmitUpdateUseCase:
        """Provide emit update use case."""
        return EmitUpdateUseCase(event_update_service=event_update_service)

    # Conversation use cases
    @provide
    def get_send_message_use_case(
        self, conversation_service: ConversationService
    ) -> SendMessageUseCase:
        """Provide send message use case."""
        return SendMessageUseCase(conversation_service=conversation_service)

    @provide
    def get_open_conversation_use_case(
        self, conversation_service: ConversationService
    ) -> OpenConversationUseCase:
        """Provide open conversation use case."""
        return OpenConversationUseCase(conversation_service=conversation_service)

    @provide
    def get_list_conversations_use_case(
        self, conversation_service: ConversationService
    ) -> ListConversationsUseCase:
        """Provide list conversations use case."""
        return ListConversationsUseCase(conversation_service=conversation_service)

    @provide
    def get_migrate_legacy_chats_use_case(
        self, conversation_service: ConversationService
    ) -> MigrateLegacyChatsUseCase:
        """Provide legacy chat migration use case."""
        return MigrateLegacyChatsUseCase(conversation_service=conversation_service)

    # Event chat use cases
    @provide
    def get_post_event_message_use_case(
        self,
        event_chat_service: EventChatService,
        event_update_service: EventUpdateService,
    ) -> PostEventMessageUseCase:
        """Provide post event message use case."""
        return PostEventMessageUseCase(
            event_chat_service=event_chat_service,
            event_update_service=event_update_service,
        )

    @provide
    def get_get_event_messages_use_case(
        self, event_chat_service: EventChatService
    ) -> GetEventMessagesUseCase:
        """Provide get event messages use case."""
        return GetEventMessagesUseCase(event_chat_service=event_chat_service)
