"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum
from typing import List, Optional, Sequence

from lostfound.domain.model.comment import Comment
from lostfound.domain.value import CommentId, ItemId, UserId
from lostfound.domain.value.common import ValueObject


class CommentSortOrder(str, Enum):
    """Sort order for comment listings.

    Ties on created_at are broken by id so pages never overlap.
    """

    NEWEST = "newest"  # created_at descending, root comment feeds
    OLDEST = "oldest"  # created_at ascending, reply threads


class CommentFilter(ValueObject):
    """Conjunction of conditions a listed comment must satisfy.

    Unset fields do not constrain the result.
    """

    item_id: Optional[ItemId] = None
    author_id: Optional[UserId] = None
    parent_id: Optional[CommentId] = None
    mentioned_user_id: Optional[UserId] = None
    is_reply: Optional[bool] = None

    def matches(self, comment: Comment) -> bool:
        """Check whether a comment satisfies the filter."""
        if self.item_id is not None and comment.item_id != self.item_id:
            return False
        if self.author_id is not None and comment.author_id != self.author_id:
            return False
        if self.parent_id is not None and comment.parent_id != self.parent_id:
            return False
        if (
            self.mentioned_user_id is not None
            and self.mentioned_user_id not in comment.mentioned_user_ids
        ):
            return False
        if self.is_reply is not None and comment.is_reply != self.is_reply:
            return False
        return True


class LikeToggle(ValueObject):
    """Outcome of an atomic like/unlike."""

    liked: bool
    like_count: int


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find(
        self,
        comment_filter: CommentFilter,
        order: CommentSortOrder = CommentSortOrder.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments matching a filter, one window at a time.

        Args:
            comment_filter: Conditions the comments must satisfy
            order: Sort order on (created_at, id)
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of matching comments in the requested order
        """
        pass

    @abstractmethod
    async def count(self, comment_filter: CommentFilter) -> int:
        """Count comments matching a filter.

        Args:
            comment_filter: Conditions the comments must satisfy

        Returns:
            Number of matching comments
        """
        pass

    @abstractmethod
    async def count_replies(
        self, parent_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        """Count direct replies for several comments (batch query).

        Args:
            parent_ids: Comment IDs to count replies for

        Returns:
            Mapping of every requested ID to its reply count (0 if none)
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to insert

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def update_text(
        self,
        comment_id: CommentId,
        text: str,
        mentioned_user_ids: Sequence[UserId],
        edited_at: datetime,
    ) -> Optional[Comment]:
        """Replace text and mentions and mark the comment edited.

        Args:
            comment_id: Comment ID
            text: New text content
            mentioned_user_ids: Mentions resolved from the new text
            edited_at: Edit timestamp

        Returns:
            Updated comment, or None if it no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete).

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a comment was deleted
        """
        pass

    @abstractmethod
    async def delete_replies(self, parent_id: CommentId) -> int:
        """Delete every direct reply of a comment.

        Args:
            parent_id: The parent comment ID

        Returns:
            Number of replies deleted
        """
        pass

    @abstractmethod
    async def toggle_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[LikeToggle]:
        """Atomically add the user to the liker set, or remove them if present.

        Must be a single atomic operation so toggles by different users
        never lose each other's updates.

        Args:
            comment_id: Comment ID
            user_id: User toggling the like

        Returns:
            Toggle outcome, or None if the comment does not exist
        """
        pass
