"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from breakloop.config import (
    ConversationSettings,
    InboxSettings,
    InviteSettings,
    Settings,
    StorageSettings,
)
from breakloop.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_storage_settings(self, settings: Settings) -> StorageSettings:
        return settings.storage

    @provide
    def provide_invite_settings(self, settings: Settings) -> InviteSettings:
        return settings.invites

    @provide
    def provide_inbox_settings(self, settings: Settings) -> InboxSettings:
        return settings.inbox

    @provide
    def provide_conversation_settings(
        self, settings: Settings
    ) -> ConversationSettings:
        return settings.conversations
