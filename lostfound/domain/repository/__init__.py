"""Repository interfaces for Lost & Found domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from lostfound.domain.repository.comment import (
    CommentFilter,
    CommentRepository,
    CommentSortOrder,
    LikeToggle,
)
from lostfound.domain.repository.item import ItemRepository
from lostfound.domain.repository.user import UserRepository

__all__ = [
    "CommentFilter",
    "CommentRepository",
    "CommentSortOrder",
    "ItemRepository",
    "LikeToggle",
    "UserRepository",
]
