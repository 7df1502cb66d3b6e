"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from harvest.config import AuthSettings, ClientSettings, ForumSettings, Settings
from harvest.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_forum_settings(self, settings: Settings) -> ForumSettings:
        """Provide forum page sizes and limits."""
        return settings.forum

    @provide(scope=Scope.APP)
    def provide_client_settings(self, settings: Settings) -> ClientSettings:
        """Provide forum API client settings."""
        return settings.client
