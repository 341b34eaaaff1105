"""Domain model entities for Lost & Found."""

from lostfound.domain.model.comment import Comment
from lostfound.domain.model.item import Item
from lostfound.domain.model.user import User

__all__ = [
    "User",
    "Item",
    "Comment",
]
