"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from lostfound.config import CommentSettings
from lostfound.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from lostfound.domain.model.comment import Comment
from lostfound.domain.repository import (
    CommentFilter,
    CommentRepository,
    CommentSortOrder,
)
from lostfound.domain.value import (
    CommentId,
    ItemId,
    Page,
    PageRequest,
    UserId,
    paginate,
)
from lostfound.util.mention import extract_mentions

from .base import Service
from .identity_service import IdentityService


class CommentService(Service):
    """Domain service for threaded comments on item posts."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        identity_service: IdentityService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            identity_service: Resolves items, users and mentions
            comment_settings: Comment content limits
        """
        self.comment_repository = comment_repository
        self.identity_service = identity_service
        self.comment_settings = comment_settings

    def _clean_text(self, text: str | None) -> str:
        """Trim comment text and enforce the content limits."""
        cleaned = (text or "").strip()
        if not cleaned:
            raise ValidationError("Comment text is required")
        if len(cleaned) > self.comment_settings.max_text_length:
            raise ValidationError(
                f"Comment text cannot exceed "
                f"{self.comment_settings.max_text_length} characters"
            )
        return cleaned

    async def _resolve_mentions(self, text: str, author_id: UserId) -> list[UserId]:
        """Resolve the users mentioned in text, excluding the author."""
        users = await self.identity_service.resolve_handles(extract_mentions(text))
        return [user.id for user in users if user.id != author_id]

    async def _get_owned_comment(
        self, comment_id: CommentId, actor_id: UserId, action: str
    ) -> Comment:
        """Load a comment and check the actor wrote it."""
        comment = await self.get_comment(comment_id)
        if comment.author_id != actor_id:
            logfire.warn(
                "Comment ownership check failed",
                comment_id=str(comment_id),
                author_id=str(comment.author_id),
                actor_id=str(actor_id),
                action=action,
            )
            raise NotAuthorizedError("comment", str(comment_id), str(actor_id), action)
        return comment

    async def _list(
        self,
        comment_filter: CommentFilter,
        order: CommentSortOrder,
        page_request: PageRequest,
    ) -> Page[Comment]:
        """Fetch one page of comments matching a filter."""
        total = await self.comment_repository.count(comment_filter)
        window = paginate(page_request.page, page_request.limit, total)
        comments = await self.comment_repository.find(
            comment_filter,
            order=order,
            limit=window.take,
            offset=window.skip,
        )
        return Page[Comment](
            items=comments,
            total=total,
            page=page_request.page,
            limit=page_request.limit,
            pages=window.page_count,
        )

    async def create_comment(
        self,
        item_id: ItemId,
        author_id: UserId,
        text: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on an item or reply to a root comment.

        Args:
            item_id: Item the comment is posted on
            author_id: Author user ID
            text: Comment text
            parent_id: Root comment being replied to (None for root comments)

        Returns:
            Created comment

        Raises:
            ValidationError: If text is empty or the parent is not a valid target
            NotFoundError: If the item, author or parent comment does not exist
        """
        with logfire.span(
            "comment_service.create_comment",
            item_id=str(item_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            text = self._clean_text(text)

            if not await self.identity_service.item_exists(item_id):
                raise NotFoundError("Item", str(item_id))
            if not await self.identity_service.user_exists(author_id):
                raise NotFoundError("User", str(author_id))

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        item_id=str(item_id),
                    )
                    raise NotFoundError("Parent comment", str(parent_id))
                if parent.item_id != item_id:
                    logfire.warn(
                        "Parent comment does not belong to item",
                        parent_id=str(parent_id),
                        parent_item_id=str(parent.item_id),
                        target_item_id=str(item_id),
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this item"
                    )
                if parent.is_reply:
                    logfire.warn("Reply to a reply rejected", parent_id=str(parent_id))
                    raise ValidationError("Replies cannot be replied to")

            # Resolve before writing so a failed lookup never persists anything
            mentioned_user_ids = await self._resolve_mentions(text, author_id)

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                item_id=item_id,
                author_id=author_id,
                text=text,
                mentioned_user_ids=mentioned_user_ids,
                parent_id=parent_id,
                is_reply=parent_id is not None,
                liker_ids=frozenset(),
                is_edited=False,
                edited_at=None,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                item_id=str(item_id),
                is_reply=saved.is_reply,
                mention_count=len(mentioned_user_ids),
            )
            return saved

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def list_by_item(
        self,
        item_id: ItemId,
        page_request: PageRequest,
        include_replies: bool = False,
    ) -> Page[Comment]:
        """List comments on an item, newest first.

        Root-only listings carry each comment's live reply count.

        Args:
            item_id: Item ID
            page_request: Page to fetch
            include_replies: Whether replies are listed alongside root comments

        Returns:
            Page of comments

        Raises:
            NotFoundError: If the item does not exist
        """
        with logfire.span(
            "comment_service.list_by_item",
            item_id=str(item_id),
            include_replies=include_replies,
            page=page_request.page,
            limit=page_request.limit,
        ):
            if not await self.identity_service.item_exists(item_id):
                raise NotFoundError("Item", str(item_id))

            comment_filter = CommentFilter(
                item_id=item_id,
                is_reply=None if include_replies else False,
            )
            page = await self._list(
                comment_filter, CommentSortOrder.NEWEST, page_request
            )

            if include_replies or not page.items:
                return page

            reply_counts = await self.comment_repository.count_replies(
                [comment.id for comment in page.items]
            )
            annotated = [
                comment.model_copy(
                    update={"reply_count": reply_counts.get(comment.id, 0)}
                )
                for comment in page.items
            ]
            return page.model_copy(update={"items": annotated})

    async def list_replies(
        self, comment_id: CommentId, page_request: PageRequest
    ) -> Page[Comment]:
        """List replies to a comment, oldest first.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.list_replies",
            comment_id=str(comment_id),
            page=page_request.page,
            limit=page_request.limit,
        ):
            await self.get_comment(comment_id)
            return await self._list(
                CommentFilter(parent_id=comment_id),
                CommentSortOrder.OLDEST,
                page_request,
            )

    async def list_by_author(
        self, author_id: UserId, page_request: PageRequest
    ) -> Page[Comment]:
        """List comments written by a user, newest first.

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span(
            "comment_service.list_by_author",
            author_id=str(author_id),
            page=page_request.page,
        ):
            if not await self.identity_service.user_exists(author_id):
                raise NotFoundError("User", str(author_id))
            return await self._list(
                CommentFilter(author_id=author_id),
                CommentSortOrder.NEWEST,
                page_request,
            )

    async def list_mentioning(
        self, user_id: UserId, page_request: PageRequest
    ) -> Page[Comment]:
        """List comments that mention a user, newest first.

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span(
            "comment_service.list_mentioning",
            user_id=str(user_id),
            page=page_request.page,
        ):
            if not await self.identity_service.user_exists(user_id):
                raise NotFoundError("User", str(user_id))
            return await self._list(
                CommentFilter(mentioned_user_id=user_id),
                CommentSortOrder.NEWEST,
                page_request,
            )

    async def update_comment(
        self, comment_id: CommentId, actor_id: UserId, text: str
    ) -> Comment:
        """Replace a comment's text and re-resolve its mentions.

        Args:
            comment_id: Comment ID
            actor_id: User performing the edit (must be the author)
            text: New text content

        Returns:
            Updated comment, marked as edited

        Raises:
            ValidationError: If text is empty
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor is not the author
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment_id),
            actor_id=str(actor_id),
        ):
            text = self._clean_text(text)
            comment = await self._get_owned_comment(comment_id, actor_id, "update")

            mentioned_user_ids = await self._resolve_mentions(text, comment.author_id)
            updated = await self.comment_repository.update_text(
                comment_id,
                text=text,
                mentioned_user_ids=mentioned_user_ids,
                edited_at=datetime.now(),
            )
            if updated is None:
                # Deleted between the ownership check and the write
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment updated",
                comment_id=str(comment_id),
                text_length=len(updated.text),
                mention_count=len(mentioned_user_ids),
            )
            return updated

    async def delete_comment(self, comment_id: CommentId, actor_id: UserId) -> int:
        """Delete a comment, and its replies if it is a root comment.

        Args:
            comment_id: Comment ID
            actor_id: User performing the delete (must be the author)

        Returns:
            Number of comments removed

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            actor_id=str(actor_id),
        ):
            comment = await self._get_owned_comment(comment_id, actor_id, "delete")

            removed = 0
            if not comment.is_reply:
                removed += await self.comment_repository.delete_replies(comment_id)
            if await self.comment_repository.delete(comment_id):
                removed += 1

            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                is_reply=comment.is_reply,
                removed=removed,
            )
            return removed

    async def count_for_item(self, item_id: ItemId) -> int:
        """Count all comments (roots and replies) on an item."""
        return await self.comment_repository.count(CommentFilter(item_id=item_id))

    async def count_for_author(self, author_id: UserId) -> int:
        """Count all comments written by a user."""
        return await self.comment_repository.count(CommentFilter(author_id=author_id))
