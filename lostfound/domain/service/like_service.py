"""Like domain service."""

import logfire
from pydantic import BaseModel

from lostfound.domain.error import NotFoundError
from lostfound.domain.model.comment import Comment
from lostfound.domain.repository import CommentRepository
from lostfound.domain.value import CommentId, UserId

from .base import Service
from .identity_service import IdentityService


class LikeToggleResult(BaseModel):
    """State of a comment after a like toggle."""

    liked: bool
    like_count: int
    comment: Comment


class LikeService(Service):
    """Domain service for liking and unliking comments."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        identity_service: IdentityService,
    ) -> None:
        """Initialize like service.

        Args:
            comment_repository: Comment repository
            identity_service: Used to check the actor exists
        """
        self.comment_repository = comment_repository
        self.identity_service = identity_service

    async def toggle_like(
        self, comment_id: CommentId, actor_id: UserId
    ) -> LikeToggleResult:
        """Like a comment, or remove the like if the actor already liked it.

        Toggling twice restores the original state.

        Args:
            comment_id: Comment ID
            actor_id: User toggling the like

        Returns:
            Whether the actor now likes the comment, the new count and the
            updated comment

        Raises:
            NotFoundError: If the comment or the actor does not exist
        """
        with logfire.span(
            "like_service.toggle_like",
            comment_id=str(comment_id),
            actor_id=str(actor_id),
        ):
            if await self.comment_repository.find_by_id(comment_id) is None:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            if not await self.identity_service.user_exists(actor_id):
                raise NotFoundError("User", str(actor_id))

            toggle = await self.comment_repository.toggle_like(comment_id, actor_id)
            comment = await self.comment_repository.find_by_id(comment_id)
            if toggle is None or comment is None:
                # Deleted between the existence check and the toggle
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment like toggled",
                comment_id=str(comment_id),
                liked=toggle.liked,
                like_count=toggle.like_count,
            )
            return LikeToggleResult(
                liked=toggle.liked,
                like_count=toggle.like_count,
                comment=comment,
            )
