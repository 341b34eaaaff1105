"""Application layer DI providers."""

from dishka import Scope, provide

from lostfound.application.usecase.comment import (
    CountItemCommentsUseCase,
    CountUserCommentsUseCase,
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetItemCommentsUseCase,
    GetMentionsUseCase,
    GetRepliesUseCase,
    GetUserCommentsUseCase,
    UpdateCommentUseCase,
)
from lostfound.application.usecase.like import ToggleLikeUseCase
from lostfound.config import PaginationSettings
from lostfound.domain.service import CommentService, IdentityService, LikeService
from lostfound.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Comment mutations
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService, identity_service: IdentityService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, identity_service=identity_service
        )

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService, identity_service: IdentityService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service, identity_service=identity_service
        )

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Comment listings
    @provide
    def get_item_comments_use_case(
        self,
        comment_service: CommentService,
        identity_service: IdentityService,
        pagination_settings: PaginationSettings,
    ) -> GetItemCommentsUseCase:
        """Provide get item comments use case."""
        return GetItemCommentsUseCase(
            comment_service=comment_service,
            identity_service=identity_service,
            pagination_settings=pagination_settings,
        )

    @provide
    def get_replies_use_case(
        self,
        comment_service: CommentService,
        identity_service: IdentityService,
        pagination_settings: PaginationSettings,
    ) -> GetRepliesUseCase:
        """Provide get replies use case."""
        return GetRepliesUseCase(
            comment_service=comment_service,
            identity_service=identity_service,
            pagination_settings=pagination_settings,
        )

    @provide
    def get_user_comments_use_case(
        self,
        comment_service: CommentService,
        identity_service: IdentityService,
        pagination_settings: PaginationSettings,
    ) -> GetUserCommentsUseCase:
        """Provide get user comments use case."""
        return GetUserCommentsUseCase(
            comment_service=comment_service,
            identity_service=identity_service,
            pagination_settings=pagination_settings,
        )

    @provide
    def get_mentions_use_case(
        self,
        comment_service: CommentService,
        identity_service: IdentityService,
        pagination_settings: PaginationSettings,
    ) -> GetMentionsUseCase:
        """Provide get mentions use case."""
        return GetMentionsUseCase(
            comment_service=comment_service,
            identity_service=identity_service,
            pagination_settings=pagination_settings,
        )

    # Counts
    @provide
    def get_count_item_comments_use_case(
        self, comment_service: CommentService
    ) -> CountItemCommentsUseCase:
        """Provide count item comments use case."""
        return CountItemCommentsUseCase(comment_service=comment_service)

    @provide
    def get_count_user_comments_use_case(
        self, comment_service: CommentService
    ) -> CountUserCommentsUseCase:
        """Provide count user comments use case."""
        return CountUserCommentsUseCase(comment_service=comment_service)

    # Likes
    @provide
    def get_toggle_like_use_case(
        self, like_service: LikeService, identity_service: IdentityService
    ) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(
            like_service=like_service, identity_service=identity_service
        )
