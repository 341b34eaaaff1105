"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .item import InMemoryItemRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryItemRepository",
    "InMemoryUserRepository",
]
