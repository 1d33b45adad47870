"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from qna.config import (
    AuthSettings,
    NotificationSettings,
    RealtimeSettings,
    ReputationSettings,
    Settings,
)
from qna.util.di.base import ProviderBase


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
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_reputation_settings(self, settings: Settings) -> ReputationSettings:
        return settings.reputation

    @provide
    def provide_notification_settings(self, settings: Settings) -> NotificationSettings:
        return settings.notifications

    @provide
    def provide_realtime_settings(self, settings: Settings) -> RealtimeSettings:
        return settings.realtime
