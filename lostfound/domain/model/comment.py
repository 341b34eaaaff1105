"""Comment entity.

Comments are threaded discussions on item posts with exactly one level of
nesting: a comment is either a root comment on the item or a reply to a
root comment.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from lostfound.domain.model.common import DomainModel
from lostfound.domain.value import CommentId, ItemId, UserId


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - parent_id: Root comment this replies to (None for root comments)
    - is_reply: Stored copy of `parent_id is not None` for cheap filtering

    reply_count is derived on read and never persisted.
    """

    id: CommentId
    item_id: ItemId
    author_id: UserId
    text: str = Field(min_length=1)
    mentioned_user_ids: list[UserId] = Field(default_factory=list)
    parent_id: Optional[CommentId] = None
    is_reply: bool = False
    liker_ids: frozenset[UserId] = Field(default_factory=frozenset)
    is_edited: bool = False
    edited_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    reply_count: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def validate_consistency(self) -> "Comment":
        """Validate the derived and paired fields agree with each other."""
        if self.is_reply != (self.parent_id is not None):
            raise ValueError("is_reply must be set exactly when parent_id is set")
        if self.is_edited != (self.edited_at is not None):
            raise ValueError("is_edited must be set exactly when edited_at is set")
        if self.author_id in self.mentioned_user_ids:
            raise ValueError("A comment cannot mention its own author")
        if len(set(self.mentioned_user_ids)) != len(self.mentioned_user_ids):
            raise ValueError("Mentioned users must be unique")
        return self

    @property
    def like_count(self) -> int:
        """Number of users who liked the comment."""
        return len(self.liker_ids)
