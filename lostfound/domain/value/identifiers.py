"""Strongly typed identifiers for Lost & Found domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

from lostfound.domain.error import NotFoundError

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
ItemId = NewType("ItemId", UUID)
CommentId = NewType("CommentId", UUID)


def parse_uuid(value: str, resource: str) -> UUID:
    """Parse an identifier received from a caller.

    A malformed identifier can never match a stored entity, so it is
    reported the same way as a missing one.

    Args:
        value: Raw identifier string
        resource: Human readable resource name used in the error message

    Returns:
        Parsed UUID

    Raises:
        NotFoundError: If the value is not a valid UUID
    """
    try:
        return UUID(str(value))
    except ValueError:
        raise NotFoundError(resource, str(value))
