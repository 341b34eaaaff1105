"""Integration tests for PostgresItemRepository."""

from uuid import uuid4

import pytest

from lostfound.domain.repository import ItemRepository
from lostfound.domain.value import ItemId, ItemType
from tests.factories import seed_item, seed_user
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


class TestItemRepositoryIntegration:
    """Integration tests for PostgresItemRepository."""

    @pytest.mark.asyncio
    async def test_find_by_ids_batch(self, integration_env):
        # Arrange
        item_repo = await integration_env.get(ItemRepository)
        alice = await seed_user(integration_env, f"alice_{uuid4().hex[:8]}")
        wallet = await seed_item(integration_env, alice, item_name="Wallet")
        umbrella = await seed_item(
            integration_env, alice, item_name="Umbrella", item_type=ItemType.FOUND
        )

        # Act
        items = await item_repo.find_by_ids([wallet.id, umbrella.id, ItemId(uuid4())])

        # Assert
        by_id = {item.id: item for item in items}
        assert set(by_id) == {wallet.id, umbrella.id}
        assert by_id[umbrella.id].type == ItemType.FOUND
        assert await item_repo.find_by_ids([]) == []
