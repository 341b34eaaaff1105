"""Get comments use cases (item feed and reply threads)."""

from pydantic import BaseModel

from lostfound.config import PaginationSettings
from lostfound.domain.service import CommentService, IdentityService
from lostfound.domain.value import CommentId, ItemId, PageRequest, parse_uuid

from .common import CommentPageResponse, present_page


class PageParams(BaseModel):
    """Raw paging parameters as received from the caller."""

    page: int | str | None = None
    limit: int | str | None = None

    def to_page_request(self, settings: PaginationSettings) -> PageRequest:
        """Normalize the raw values into a page request."""
        return PageRequest.parse(
            self.page,
            self.limit,
            default_limit=settings.default_limit,
            max_limit=settings.max_limit,
        )


class GetItemCommentsRequest(PageParams):
    """Get comments for an item request."""

    item_id: str  # UUID string
    include_replies: bool = False


class GetItemCommentsUseCase:
    """Use case for listing the comments on an item, newest first."""

    def __init__(
        self,
        comment_service: CommentService,
        identity_service: IdentityService,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize get item comments use case.

        Args:
            comment_service: Comment domain service
            identity_service: Used to populate authors and mentions
            pagination_settings: Default and maximum page sizes
        """
        self.comment_service = comment_service
        self.identity_service = identity_service
        self.pagination_settings = pagination_settings

    async def execute(self, request: GetItemCommentsRequest) -> CommentPageResponse:
        """Execute get item comments flow.

        Root-only listings (the default) carry each comment's reply count.

        Raises:
            NotFoundError: If the item does not exist
        """
        page = await self.comment_service.list_by_item(
            item_id=ItemId(parse_uuid(request.item_id, "Item")),
            page_request=request.to_page_request(self.pagination_settings),
            include_replies=request.include_replies,
        )
        return await present_page(page, self.identity_service)


class GetRepliesRequest(PageParams):
    """Get replies to a comment request."""

    comment_id: str  # UUID string


class GetRepliesUseCase:
    """Use case for listing the replies to a comment, oldest first."""

    def __init__(
        self,
        comment_service: CommentService,
        identity_service: IdentityService,
        pagination_settings: PaginationSettings,
    ) -> None:
        self.comment_service = comment_service
        self.identity_service = identity_service
        self.pagination_settings = pagination_settings

    async def execute(self, request: GetRepliesRequest) -> CommentPageResponse:
        """Execute get replies flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        page = await self.comment_service.list_replies(
            comment_id=CommentId(parse_uuid(request.comment_id, "Comment")),
            page_request=request.to_page_request(self.pagination_settings),
        )
        return await present_page(page, self.identity_service)
