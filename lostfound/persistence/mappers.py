"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from lostfound.domain.model import Comment, Item, User
from lostfound.domain.value import (
    CommentId,
    ItemId,
    ItemStatus,
    ItemType,
    UserId,
)
from lostfound.domain.value.types import Handle


def _uuid(value: Any) -> UUID:
    """Coerce a driver value (UUID or str) to UUID."""
    return UUID(value) if isinstance(value, str) else value


def _uuid_list(values: Iterable[Any] | None) -> list[UUID]:
    return [_uuid(v) for v in values or []]


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        username=Handle(row["username"]),
        email=row.get("email"),
        profile_picture=row.get("profile_picture"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    user_dict = user.model_dump()
    user_dict["username"] = user.username.root
    return user_dict


def row_to_item(row: Dict[str, Any]) -> Item:
    """Convert database row to Item domain model.

    Args:
        row: Database row as dict

    Returns:
        Item domain model
    """
    return Item(
        id=ItemId(_uuid(row["id"])),
        item_name=row["item_name"],
        type=ItemType(row["type"]),
        status=ItemStatus(row["status"]),
        reported_by=UserId(_uuid(row["reported_by"])),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def item_to_dict(item: Item) -> Dict[str, Any]:
    """Convert Item domain model to database dict."""
    item_dict = item.model_dump()
    item_dict["type"] = item.type.value
    item_dict["status"] = item.status.value
    return item_dict


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        item_id=ItemId(_uuid(row["item_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        text=row["text"],
        mentioned_user_ids=[UserId(u) for u in _uuid_list(row["mentioned_user_ids"])],
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        is_reply=row["is_reply"],
        liker_ids=frozenset(UserId(u) for u in _uuid_list(row["liker_ids"])),
        is_edited=row["is_edited"],
        edited_at=row.get("edited_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    reply_count is derived on read and has no column.
    """
    comment_dict = comment.model_dump(exclude={"reply_count"})
    comment_dict["liker_ids"] = sorted(comment.liker_ids, key=str)
    return comment_dict
