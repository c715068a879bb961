"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from quill.config import AuthSettings, CommentSettings, Settings, UploadSettings
from quill.util.di.base import ProviderBase


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
        """Provide auth settings."""
        return settings.auth

    @provide
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide comment tree settings."""
        return settings.comments

    @provide
    def provide_upload_settings(self, settings: Settings) -> UploadSettings:
        """Provide upload settings."""
        return settings.uploads
