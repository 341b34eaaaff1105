"""PostgreSQL implementation of Item repository."""

from typing import List, Optional, Sequence

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from lostfound.domain.model import Item
from lostfound.domain.repository import ItemRepository
from lostfound.domain.value import ItemId
from lostfound.persistence.mappers import item_to_dict, row_to_item
from lostfound.persistence.tables import items_table


class PostgresItemRepository(ItemRepository):
    """PostgreSQL implementation of ItemRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, item_id: ItemId) -> Optional[Item]:
        """Find an item by ID."""
        stmt = select(items_table).where(items_table.c.id == item_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_item(dict(row)) if row else None

    async def find_by_ids(self, item_ids: Sequence[ItemId]) -> List[Item]:
        """Find several items by ID with one IN query."""
        if not item_ids:
            return []
        stmt = select(items_table).where(items_table.c.id.in_(list(item_ids)))
        result = await self.session.execute(stmt)
        return [row_to_item(dict(row)) for row in result.mappings().all()]

    async def exists(self, item_id: ItemId) -> bool:
        """Check whether an item exists."""
        stmt = select(exists().where(items_table.c.id == item_id))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def save(self, item: Item) -> Item:
        """Save an item (create or update)."""
        item_dict = item_to_dict(item)

        if await self.exists(item.id):
            stmt = (
                items_table.update()
                .where(items_table.c.id == item.id)
                .values(**item_dict)
            )
        else:
            stmt = items_table.insert().values(**item_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return item
