"""Get comments by user use cases (authored and mentioning)."""

from lostfound.config import PaginationSettings
from lostfound.domain.service import CommentService, IdentityService
from lostfound.domain.value import UserId, parse_uuid

from .common import CommentPageResponse, present_page
from .get_comments import PageParams


class GetUserCommentsRequest(PageParams):
    """Get comments for a user request."""

    user_id: str  # UUID string


class GetUserCommentsUseCase:
    """Use case for listing the comments a user wrote, newest first."""

    def __init__(
        self,
        comment_service: CommentService,
        identity_service: IdentityService,
        pagination_settings: PaginationSettings,
    ) -> None:
        self.comment_service = comment_service
        self.identity_service = identity_service
        self.pagination_settings = pagination_settings

    async def execute(self, request: GetUserCommentsRequest) -> CommentPageResponse:
        """Execute get user comments flow.

        Raises:
            NotFoundError: If the user does not exist
        """
        page = await self.comment_service.list_by_author(
            author_id=UserId(parse_uuid(request.user_id, "User")),
            page_request=request.to_page_request(self.pagination_settings),
        )
        return await present_page(page, self.identity_service, with_items=True)


class GetMentionsUseCase:
    """Use case for listing the comments that mention a user, newest first."""

    def __init__(
        self,
        comment_service: CommentService,
        identity_service: IdentityService,
        pagination_settings: PaginationSettings,
    ) -> None:
        self.comment_service = comment_service
        self.identity_service = identity_service
        self.pagination_settings = pagination_settings

    async def execute(self, request: GetUserCommentsRequest) -> CommentPageResponse:
        """Execute get mentions flow.

        Raises:
            NotFoundError: If the user does not exist
        """
        page = await self.comment_service.list_mentioning(
            user_id=UserId(parse_uuid(request.user_id, "User")),
            page_request=request.to_page_request(self.pagination_settings),
        )
        return await present_page(page, self.identity_service, with_items=True)
