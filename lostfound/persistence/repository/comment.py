"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import Any, List, Optional, Sequence

from sqlalchemy import and_, case, func, literal, select, true
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from sqlalchemy.ext.asyncio import AsyncSession

from lostfound.domain.model import Comment
from lostfound.domain.repository import (
    CommentFilter,
    CommentRepository,
    CommentSortOrder,
    LikeToggle,
)
from lostfound.domain.value import CommentId, UserId
from lostfound.persistence.mappers import comment_to_dict, row_to_comment
from lostfound.persistence.tables import comments_table


def _where(comment_filter: CommentFilter) -> Any:
    """Build the WHERE clause for a filter."""
    c = comments_table.c
    conditions = []
    if comment_filter.item_id is not None:
        conditions.append(c.item_id == comment_filter.item_id)
    if comment_filter.author_id is not None:
        conditions.append(c.author_id == comment_filter.author_id)
    if comment_filter.parent_id is not None:
        conditions.append(c.parent_id == comment_filter.parent_id)
    if comment_filter.mentioned_user_id is not None:
        # Served by the GIN index on mentioned_user_ids
        conditions.append(
            c.mentioned_user_ids.contains([comment_filter.mentioned_user_id])
        )
    if comment_filter.is_reply is not None:
        conditions.append(c.is_reply == comment_filter.is_reply)
    return and_(true(), *conditions)


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find(
        self,
        comment_filter: CommentFilter,
        order: CommentSortOrder = CommentSortOrder.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments matching a filter, ordered on (created_at, id)."""
        c = comments_table.c
        if order == CommentSortOrder.NEWEST:
            ordering = (c.created_at.desc(), c.id.desc())
        else:
            ordering = (c.created_at.asc(), c.id.asc())

        stmt = (
            select(comments_table)
            .where(_where(comment_filter))
            .order_by(*ordering)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def count(self, comment_filter: CommentFilter) -> int:
        """Count comments matching a filter."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(_where(comment_filter))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_replies(
        self, parent_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        """Count direct replies for several comments with one grouped query."""
        counts: dict[CommentId, int] = {pid: 0 for pid in parent_ids}
        if not parent_ids:
            return counts

        stmt = (
            select(comments_table.c.parent_id, func.count().label("reply_count"))
            .where(comments_table.c.parent_id.in_(list(parent_ids)))
            .group_by(comments_table.c.parent_id)
        )
        result = await self.session.execute(stmt)
        for row in result.all():
            counts[CommentId(row.parent_id)] = row.reply_count
        return counts

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_text(
        self,
        comment_id: CommentId,
        text: str,
        mentioned_user_ids: Sequence[UserId],
        edited_at: datetime,
    ) -> Optional[Comment]:
        """Replace text and mentions in a single UPDATE ... RETURNING."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(
                text=text,
                mentioned_user_ids=list(mentioned_user_ids),
                is_edited=True,
                edited_at=edited_at,
                updated_at=edited_at,
            )
            .returning(*comments_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_comment(dict(row)) if row else None

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_replies(self, parent_id: CommentId) -> int:
        """Delete every direct reply of a comment."""
        stmt = comments_table.delete().where(comments_table.c.parent_id == parent_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def toggle_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[LikeToggle]:
        """Flip the user's membership in liker_ids with one UPDATE.

        The membership test and the write happen in the same statement, so
        concurrent toggles by different users are serialized by the row lock.
        """
        likers = comments_table.c.liker_ids
        uid = literal(user_id, UUID)
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(
                liker_ids=case(
                    (
                        likers.contains([user_id]),
                        func.array_remove(likers, uid, type_=ARRAY(UUID)),
                    ),
                    else_=func.array_append(likers, uid, type_=ARRAY(UUID)),
                ),
            )
            .returning(likers)
        )
        result = await self.session.execute(stmt)
        row = result.first()
        await self.session.flush()
        if row is None:
            return None

        liker_ids = set(row.liker_ids or [])
        return LikeToggle(liked=user_id in liker_ids, like_count=len(liker_ids))
