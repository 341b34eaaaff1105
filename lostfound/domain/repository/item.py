"""Item repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from lostfound.domain.model.item import Item
from lostfound.domain.value import ItemId


class ItemRepository(ABC):
    """Read access to item posts owned by the item collaborator."""

    @abstractmethod
    async def find_by_id(self, item_id: ItemId) -> Optional[Item]:
        """Find an item by ID.

        Args:
            item_id: The item's unique identifier

        Returns:
            The item if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, item_ids: Sequence[ItemId]) -> List[Item]:
        """Find several items by ID (batch query).

        Args:
            item_ids: IDs to look up; unknown IDs are skipped

        Returns:
            Items found, in no particular order
        """
        pass

    @abstractmethod
    async def exists(self, item_id: ItemId) -> bool:
        """Check whether an item exists."""
        pass

    @abstractmethod
    async def save(self, item: Item) -> Item:
        """Save or update an item."""
        pass
