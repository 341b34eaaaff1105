"""In-memory user repository for testing."""

from typing import Optional, Sequence

from lostfound.domain.model.user import User
from lostfound.domain.repository.user import UserRepository
from lostfound.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def exists(self, user_id: UserId) -> bool:
        """Check whether a user exists."""
        return user_id in self._users

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users by ID."""
        return [
            self._users[uid] for uid in dict.fromkeys(user_ids) if uid in self._users
        ]

    async def find_by_usernames(
        self, usernames: Sequence[str], case_sensitive: bool = True
    ) -> list[User]:
        """Find users whose username is one of the given handles."""
        if case_sensitive:
            wanted = set(usernames)
            return [u for u in self._users.values() if u.username.root in wanted]
        wanted = {name.lower() for name in usernames}
        return [u for u in self._users.values() if u.username.root.lower() in wanted]

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user
