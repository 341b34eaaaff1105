"""Delete comment use case."""

from pydantic import BaseModel

from lostfound.domain.service import CommentService
from lostfound.domain.value import CommentId, UserId, parse_uuid


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    actor_id: str  # User ID from authenticated user


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    deleted_count: int


class DeleteCommentUseCase:
    """Use case for deleting a comment and, for root comments, its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor is not the author
        """
        deleted = await self.comment_service.delete_comment(
            comment_id=CommentId(parse_uuid(request.comment_id, "Comment")),
            actor_id=UserId(parse_uuid(request.actor_id, "User")),
        )
        return DeleteCommentResponse(deleted_count=deleted)
