"""In-memory comment repository for testing."""

from datetime import datetime
from itertools import count
from typing import Optional, Sequence

from lostfound.domain.model.comment import Comment
from lostfound.domain.repository.comment import (
    CommentFilter,
    CommentRepository,
    CommentSortOrder,
    LikeToggle,
)
from lostfound.domain.value import CommentId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Ties on created_at are broken by insertion order.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._sequence: dict[CommentId, int] = {}
        self._counter = count()

    def _sorted(
        self, comment_filter: CommentFilter, order: CommentSortOrder
    ) -> list[Comment]:
        comments = [c for c in self._comments.values() if comment_filter.matches(c)]
        comments.sort(
            key=lambda c: (c.created_at, self._sequence[c.id]),
            reverse=order == CommentSortOrder.NEWEST,
        )
        return comments

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find(
        self,
        comment_filter: CommentFilter,
        order: CommentSortOrder = CommentSortOrder.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Comment]:
        """Find comments matching a filter."""
        return self._sorted(comment_filter, order)[offset : offset + limit]

    async def count(self, comment_filter: CommentFilter) -> int:
        """Count comments matching a filter."""
        return sum(1 for c in self._comments.values() if comment_filter.matches(c))

    async def count_replies(
        self, parent_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        """Count direct replies for several comments."""
        counts: dict[CommentId, int] = {pid: 0 for pid in parent_ids}
        for comment in self._comments.values():
            if comment.parent_id in counts:
                counts[comment.parent_id] += 1
        return counts

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stored = comment.model_copy(update={"reply_count": None})
        self._comments[comment.id] = stored
        self._sequence.setdefault(comment.id, next(self._counter))
        return stored

    async def update_text(
        self,
        comment_id: CommentId,
        text: str,
        mentioned_user_ids: Sequence[UserId],
        edited_at: datetime,
    ) -> Optional[Comment]:
        """Replace text and mentions and mark the comment edited."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        updated = comment.model_copy(
            update={
                "text": text,
                "mentioned_user_ids": list(mentioned_user_ids),
                "is_edited": True,
                "edited_at": edited_at,
                "updated_at": edited_at,
            }
        )
        self._comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        self._sequence.pop(comment_id, None)
        return self._comments.pop(comment_id, None) is not None

    async def delete_replies(self, parent_id: CommentId) -> int:
        """Delete every direct reply of a comment."""
        reply_ids = [c.id for c in self._comments.values() if c.parent_id == parent_id]
        for reply_id in reply_ids:
            await self.delete(reply_id)
        return len(reply_ids)

    async def toggle_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[LikeToggle]:
        """Flip the user's membership in the liker set.

        There is no await between the read and the write, so the flip is
        atomic with respect to other coroutines.
        """
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        liked = user_id not in comment.liker_ids
        if liked:
            liker_ids = comment.liker_ids | {user_id}
        else:
            liker_ids = comment.liker_ids - {user_id}
        self._comments[comment_id] = comment.model_copy(
            update={"liker_ids": liker_ids}
        )
        return LikeToggle(liked=liked, like_count=len(liker_ids))
