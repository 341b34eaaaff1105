"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from lostfound.domain.model.user import User
from lostfound.domain.value import UserId


class UserRepository(ABC):
    """Read access to users owned by the identity collaborator."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists(self, user_id: UserId) -> bool:
        """Check whether a user exists."""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users by ID (batch query).

        Args:
            user_ids: IDs to look up; unknown IDs are skipped

        Returns:
            Users found, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_usernames(
        self, usernames: Sequence[str], case_sensitive: bool = True
    ) -> List[User]:
        """Find users whose username is one of the given handles (batch query).

        Args:
            usernames: Handles to match
            case_sensitive: Whether matching is exact or case-insensitive

        Returns:
            Matching users, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save or update a user."""
        pass
