"""PostgreSQL repository implementations."""

from lostfound.persistence.repository.comment import PostgresCommentRepository
from lostfound.persistence.repository.item import PostgresItemRepository
from lostfound.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresItemRepository",
    "PostgresUserRepository",
]
