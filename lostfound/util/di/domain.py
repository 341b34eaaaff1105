"""Domain layer DI providers."""

from dishka import Scope, provide

from lostfound.config import AuthSettings, CommentSettings, MentionSettings
from lostfound.domain.repository import (
    CommentRepository,
    ItemRepository,
    UserRepository,
)
from lostfound.domain.service import (
    CommentService,
    IdentityService,
    JWTService,
    LikeService,
)
from lostfound.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service (stateless, shared)."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_identity_service(
        self,
        user_repository: UserRepository,
        item_repository: ItemRepository,
        mention_settings: MentionSettings,
    ) -> IdentityService:
        """Provide identity resolution domain service."""
        return IdentityService(
            user_repository=user_repository,
            item_repository=item_repository,
            mention_settings=mention_settings,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        identity_service: IdentityService,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            identity_service=identity_service,
            comment_settings=comment_settings,
        )

    @provide
    def get_like_service(
        self,
        comment_repository: CommentRepository,
        identity_service: IdentityService,
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            comment_repository=comment_repository,
            identity_service=identity_service,
        )
