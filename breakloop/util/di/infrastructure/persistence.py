"""Persistence infrastructure providers."""

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from breakloop.config import Settings, StorageSettings
from breakloop.domain.repository import (
    ConversationRepository,
    EventChatRepository,
    EventUpdateRepository,
    FriendRequestRepository,
    InviteRepository,
    LegacyChatRepository,
)
from breakloop.persistence.database import create_engine, create_session_factory
from breakloop.persistence.repository import (
    KeyValueConversationRepository,
    KeyValueEventChatRepository,
    KeyValueEventUpdateRepository,
    KeyValueFriendRequestRepository,
    KeyValueInviteRepository,
    KeyValueLegacyChatRepository,
)
from breakloop.persistence.store import KeyValueStore, SqlKeyValueStore
from breakloop.util.di.base import ProviderBase
from breakloop.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base.

    Implementations provide a ``KeyValueStore``; the collection repositories
    on top of it are shared.
    """

    __mock_component__ = "persistence"

    @provide(scope=Scope.REQUEST)
    def get_invite_repository(
        self, store: KeyValueStore, storage: StorageSettings
    ) -> InviteRepository:
        """Provide Invite repository."""
        return KeyValueInviteRepository(store, storage.invites_key)

    @provide(scope=Scope.REQUEST)
    def get_friend_request_repository(
        self, store: KeyValueStore, storage: StorageSettings
    ) -> FriendRequestRepository:
        """Provide FriendRequest repository."""
        return KeyValueFriendRequestRepository(store, storage.friend_requests_key)

    @provide(scope=Scope.REQUEST)
    def get_event_update_repository(
        self, store: KeyValueStore, storage: StorageSettings
    ) -> EventUpdateRepository:
        """Provide EventUpdate repository."""
        return KeyValueEventUpdateRepository(store, storage.event_updates_key)

    @provide(scope=Scope.REQUEST)
    def get_event_chat_repository(
        self, store: KeyValueStore, storage: StorageSettings
    ) -> EventChatRepository:
        """Provide EventChat repository."""
        return KeyValueEventChatRepository(store, storage.event_chats_key)

    @provide(scope=Scope.REQUEST)
    def get_conversation_repository(
        self, store: KeyValueStore, storage: StorageSettings
    ) -> ConversationRepository:
        """Provide Conversation repository."""
        return KeyValueConversationRepository(store, storage.conversations_key)

    @provide(scope=Scope.REQUEST)
    def get_legacy_chat_repository(
        self, store: KeyValueStore, storage: StorageSettings
    ) -> LegacyChatRepository:
        """Provide legacy chat repository."""
        return KeyValueLegacyChatRepository(store, storage.legacy_chats_key)


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.APP)
    def get_store(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> KeyValueStore:
        """Provide the key-value store.

        APP-scoped so every request shares the same per-key locks.
        """
        return SqlKeyValueStore(session_factory)
