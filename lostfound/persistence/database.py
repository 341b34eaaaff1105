"""Engine and session factory for the comments database.

One engine per process; one session (one transaction) per API request.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from lostfound.config import DatabaseSettings


def create_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the asyncpg-backed engine.

    Args:
        database: URL and pool sizing
        echo: Log every statement (debug only)
    """
    return create_async_engine(
        database.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions whose rows stay readable after commit.

    Repositories map rows to frozen models as soon as they are fetched, so
    expiring them on commit would only cost extra round trips.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
