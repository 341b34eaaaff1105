"""Response models shared by the comment use cases."""

from datetime import datetime
from typing import Sequence

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from lostfound.domain.model import Comment, Item, User
from lostfound.domain.service import IdentityService
from lostfound.domain.value import ItemId, Page, UserId


class CamelModel(BaseModel):
    """Response model serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MentionedUser(CamelModel):
    """User referenced by a comment (mentioned or liking it)."""

    id: str
    name: str
    username: str


class CommentAuthor(MentionedUser):
    """Author of a comment."""

    profile_picture: str | None = None


class ItemSummary(CamelModel):
    """Item a comment was posted on, as shown in student feeds."""

    id: str
    item_name: str
    type: str


class CommentItem(CamelModel):
    """Comment with its author, mentions and likers populated.

    item is only filled in for the per-student feeds, where comments span
    several items.
    """

    id: str
    text: str
    item_id: str
    item: ItemSummary | None = None
    author: CommentAuthor | None
    mentioned_users: list[MentionedUser]
    parent_comment_id: str | None
    is_reply: bool
    likes: list[MentionedUser]
    like_count: int
    is_edited: bool
    edited_at: datetime | None
    created_at: datetime
    updated_at: datetime
    reply_count: int | None = None


class CommentPageResponse(CamelModel):
    """One page of populated comments."""

    comments: list[CommentItem]
    count: int
    total: int
    page: int
    pages: int


def _author(user: User | None) -> CommentAuthor | None:
    if user is None:
        return None
    return CommentAuthor(
        id=str(user.id),
        name=user.name,
        username=user.username.root,
        profile_picture=user.profile_picture,
    )


def _user_refs(users: Sequence[User]) -> list[MentionedUser]:
    return [
        MentionedUser(id=str(user.id), name=user.name, username=user.username.root)
        for user in users
    ]


def _item_summary(item: Item | None) -> ItemSummary | None:
    if item is None:
        return None
    return ItemSummary(id=str(item.id), item_name=item.item_name, type=item.type.value)


def to_comment_item(
    comment: Comment,
    users: dict[UserId, User],
    items: dict[ItemId, Item] | None = None,
) -> CommentItem:
    """Build a response item from a comment and lookup tables.

    Mentioned users and likers missing from the user table are skipped.
    Likers are listed by username.
    """
    mentioned = [users[uid] for uid in comment.mentioned_user_ids if uid in users]
    likers = sorted(
        (users[uid] for uid in comment.liker_ids if uid in users),
        key=lambda user: (user.username.root, str(user.id)),
    )
    return CommentItem(
        id=str(comment.id),
        text=comment.text,
        item_id=str(comment.item_id),
        item=_item_summary(items.get(comment.item_id)) if items else None,
        author=_author(users.get(comment.author_id)),
        mentioned_users=_user_refs(mentioned),
        parent_comment_id=str(comment.parent_id) if comment.parent_id else None,
        is_reply=comment.is_reply,
        likes=_user_refs(likers),
        like_count=comment.like_count,
        is_edited=comment.is_edited,
        edited_at=comment.edited_at,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
        reply_count=comment.reply_count,
    )


async def present_comments(
    comments: Sequence[Comment],
    identity_service: IdentityService,
    with_items: bool = False,
) -> list[CommentItem]:
    """Populate authors, mentions and likers for several comments.

    All referenced users are fetched with one batched lookup, and the
    commented items with another when with_items is set.
    """
    user_ids = [
        uid
        for comment in comments
        for uid in (comment.author_id, *comment.mentioned_user_ids, *comment.liker_ids)
    ]
    users = await identity_service.get_users(user_ids)
    items = None
    if with_items:
        items = await identity_service.get_items(c.item_id for c in comments)
    return [to_comment_item(comment, users, items) for comment in comments]


async def present_comment(
    comment: Comment, identity_service: IdentityService
) -> CommentItem:
    """Populate author, mentions and likers for one comment."""
    items = await present_comments([comment], identity_service)
    return items[0]


async def present_page(
    page: Page[Comment],
    identity_service: IdentityService,
    with_items: bool = False,
) -> CommentPageResponse:
    """Populate one page of comments and carry its paging totals."""
    return CommentPageResponse(
        comments=await present_comments(page.items, identity_service, with_items),
        count=page.count,
        total=page.total,
        page=page.page,
        pages=page.pages,
    )
