"""User entity.

Students are registered and authenticated by the identity collaborator;
the comment subsystem only reads them to resolve authors and mentions.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from lostfound.domain.model.common import DomainModel
from lostfound.domain.value import UserId
from lostfound.domain.value.types import Handle


class User(DomainModel):
    """Registered student."""

    id: UserId
    name: str = Field(min_length=1, max_length=255)
    username: Handle
    email: Optional[str] = None
    profile_picture: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
