"""Toggle like use case."""

from pydantic import BaseModel

from lostfound.application.usecase.comment.common import (
    CamelModel,
    CommentItem,
    present_comment,
)
from lostfound.domain.service import IdentityService, LikeService
from lostfound.domain.value import CommentId, UserId, parse_uuid


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    comment_id: str  # UUID string
    actor_id: str  # User ID from authenticated user


class ToggleLikeResponse(CamelModel):
    """Toggle like response."""

    liked: bool
    like_count: int
    comment: CommentItem


class ToggleLikeUseCase:
    """Use case for liking or unliking a comment."""

    def __init__(
        self,
        like_service: LikeService,
        identity_service: IdentityService,
    ) -> None:
        """Initialize toggle like use case.

        Args:
            like_service: Like domain service
            identity_service: Used to populate author and mentions
        """
        self.like_service = like_service
        self.identity_service = identity_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Args:
            request: Toggle like request

        Returns:
            New like state, count and the updated comment

        Raises:
            NotFoundError: If the comment or the actor does not exist
        """
        result = await self.like_service.toggle_like(
            comment_id=CommentId(parse_uuid(request.comment_id, "Comment")),
            actor_id=UserId(parse_uuid(request.actor_id, "User")),
        )
        return ToggleLikeResponse(
            liked=result.liked,
            like_count=result.like_count,
            comment=await present_comment(result.comment, self.identity_service),
        )
