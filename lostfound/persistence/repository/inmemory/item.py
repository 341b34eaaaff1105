"""In-memory item repository for testing."""

from typing import Optional, Sequence

from lostfound.domain.model.item import Item
from lostfound.domain.repository.item import ItemRepository
from lostfound.domain.value import ItemId


class InMemoryItemRepository(ItemRepository):
    """In-memory implementation of ItemRepository for testing."""

    def __init__(self) -> None:
        self._items: dict[ItemId, Item] = {}

    async def find_by_id(self, item_id: ItemId) -> Optional[Item]:
        """Find an item by ID."""
        return self._items.get(item_id)

    async def find_by_ids(self, item_ids: Sequence[ItemId]) -> list[Item]:
        """Find several items by ID."""
        return [
            self._items[iid] for iid in dict.fromkeys(item_ids) if iid in self._items
        ]

    async def exists(self, item_id: ItemId) -> bool:
        """Check whether an item exists."""
        return item_id in self._items

    async def save(self, item: Item) -> Item:
        """Save or update an item."""
        self._items[item.id] = item
        return item
