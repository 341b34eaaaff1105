"""Integration tests run against PostgreSQL at DATABASE__URL.

The schema is created on first use. Without a reachable database every
integration test is skipped.
"""

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from lostfound.config import Settings
from lostfound.persistence.database import create_engine
from lostfound.persistence.tables import metadata


@pytest_asyncio.fixture(autouse=True)
async def database_schema():
    engine = create_engine(Settings().database)
    try:
        async with engine.begin() as connection:
            await connection.execute(text('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"'))
            await connection.run_sync(metadata.create_all)
    except (OSError, SQLAlchemyError) as e:
        pytest.skip(f"PostgreSQL not reachable: {e}")
    finally:
        await engine.dispose()
    yield
