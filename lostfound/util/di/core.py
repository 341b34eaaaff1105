"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from lostfound.config import (
    AuthSettings,
    CommentSettings,
    MentionSettings,
    PaginationSettings,
    Settings,
)
from lostfound.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    Sections are provided separately so services depend only on what they use.
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
    def provide_pagination_settings(self, settings: Settings) -> PaginationSettings:
        return settings.pagination

    @provide
    def provide_mention_settings(self, settings: Settings) -> MentionSettings:
        return settings.mentions

    @provide
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        return settings.comments
