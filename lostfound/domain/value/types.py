"""Domain value objects for Lost & Found.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from lostfound.domain.value.common import RootValueObject


class ItemType(str, Enum):
    """Whether a posted item was lost or found."""

    LOST = "lost"
    FOUND = "found"


class ItemStatus(str, Enum):
    """Lifecycle status of a posted item."""

    AVAILABLE = "available"
    CLAIMED = "claimed"
    RESOLVED = "resolved"


class Handle(RootValueObject[str]):
    """Student username, the token that follows "@" in a mention."""

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle is not empty and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Handle must be 1-255 characters")
        return v
