"""Update comment use case."""

from pydantic import BaseModel

from lostfound.domain.service import CommentService, IdentityService
from lostfound.domain.value import CommentId, UserId, parse_uuid

from .common import CommentItem, present_comment


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    actor_id: str  # User ID from authenticated user
    text: str


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: CommentItem


class UpdateCommentUseCase:
    """Use case for editing a comment's text."""

    def __init__(
        self,
        comment_service: CommentService,
        identity_service: IdentityService,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            identity_service: Used to populate author and mentions
        """
        self.comment_service = comment_service
        self.identity_service = identity_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request

        Returns:
            Updated comment with re-resolved mentions

        Raises:
            ValidationError: If text is empty
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor is not the author
        """
        comment = await self.comment_service.update_comment(
            comment_id=CommentId(parse_uuid(request.comment_id, "Comment")),
            actor_id=UserId(parse_uuid(request.actor_id, "User")),
            text=request.text,
        )

        return UpdateCommentResponse(
            comment=await present_comment(comment, self.identity_service)
        )
