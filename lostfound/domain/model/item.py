"""Item entity.

A lost or found item post. Items are owned by the item collaborator;
comments only need to know that the item exists.
"""

from datetime import datetime

from pydantic import Field

from lostfound.domain.model.common import DomainModel
from lostfound.domain.value import ItemId, ItemStatus, ItemType, UserId


class Item(DomainModel):
    """Lost or found item post."""

    id: ItemId
    item_name: str = Field(min_length=1, max_length=200)
    type: ItemType
    reported_by: UserId
    status: ItemStatus = ItemStatus.AVAILABLE
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
