"""Create comment use case."""

from pydantic import BaseModel

from lostfound.domain.service import CommentService, IdentityService
from lostfound.domain.value import CommentId, ItemId, UserId, parse_uuid

from .common import CommentItem, present_comment


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    item_id: str  # UUID string
    text: str
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Root comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase:
    """Use case for commenting on an item or replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        identity_service: IdentityService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            identity_service: Used to populate author and mentions
        """
        self.comment_service = comment_service
        self.identity_service = identity_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Create comment via comment service (validates item, author, parent
           and resolves mentions)
        2. Populate author and mentioned users for the response

        Args:
            request: Create comment request

        Returns:
            Created comment with author and mentions populated

        Raises:
            ValidationError: If text is empty or the parent is not a valid target
            NotFoundError: If the item, author or parent comment does not exist
        """
        item_id = ItemId(parse_uuid(request.item_id, "Item"))
        author_id = UserId(parse_uuid(request.author_id, "User"))
        parent_id = (
            CommentId(parse_uuid(request.parent_id, "Parent comment"))
            if request.parent_id
            else None
        )

        comment = await self.comment_service.create_comment(
            item_id=item_id,
            author_id=author_id,
            text=request.text,
            parent_id=parent_id,
        )

        return CreateCommentResponse(
            comment=await present_comment(comment, self.identity_service)
        )
