"""PostgreSQL implementation of User repository."""

from typing import List, Optional, Sequence

from sqlalchemy import exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from lostfound.domain.model import User
from lostfound.domain.repository import UserRepository
from lostfound.domain.value import UserId
from lostfound.persistence.mappers import row_to_user, user_to_dict
from lostfound.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def exists(self, user_id: UserId) -> bool:
        """Check whether a user exists."""
        stmt = select(exists().where(users_table.c.id == user_id))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users by ID with one IN query."""
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(list(user_ids)))
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def find_by_usernames(
        self, usernames: Sequence[str], case_sensitive: bool = True
    ) -> List[User]:
        """Find users by username with one IN query.

        Args:
            usernames: Handles to match
            case_sensitive: Compare lower-cased values when False

        Returns:
            Matching users
        """
        if not usernames:
            return []

        if case_sensitive:
            condition = users_table.c.username.in_(list(usernames))
        else:
            condition = func.lower(users_table.c.username).in_(
                [name.lower() for name in usernames]
            )

        stmt = select(users_table).where(condition)
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        user_dict = user_to_dict(user)

        if await self.exists(user.id):
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return user
