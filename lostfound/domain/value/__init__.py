"""Domain value objects for Lost & Found."""

from lostfound.domain.value.identifiers import CommentId, ItemId, UserId, parse_uuid
from lostfound.domain.value.pagination import Page, PageRequest, PageWindow, paginate
from lostfound.domain.value.types import Handle, ItemStatus, ItemType

__all__ = [
    # Identifiers
    "UserId",
    "ItemId",
    "CommentId",
    "parse_uuid",
    # Types
    "Handle",
    "ItemType",
    "ItemStatus",
    # Pagination
    "Page",
    "PageRequest",
    "PageWindow",
    "paginate",
]
