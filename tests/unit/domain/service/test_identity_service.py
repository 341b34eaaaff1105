"""Unit tests for IdentityService."""

from uuid import uuid4

import pytest

from lostfound.config import MentionSettings
from lostfound.domain.model import User
from lostfound.domain.service import IdentityService
from lostfound.domain.value import Handle, ItemId, UserId
from lostfound.persistence.repository.inmemory import (
    InMemoryItemRepository,
    InMemoryUserRepository,
)
from tests.factories import seed_item, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestLookups:
    """Tests for existence checks and batch lookups."""

    @pytest.mark.asyncio
    async def test_exists(self, unit_env):
        identity_service = await unit_env.get(IdentityService)
        alice = await seed_user(unit_env, "alice")
        item = await seed_item(unit_env, alice)

        assert await identity_service.user_exists(alice.id) is True
        assert await identity_service.item_exists(item.id) is True
        assert await identity_service.user_exists(UserId(uuid4())) is False
        assert await identity_service.item_exists(ItemId(uuid4())) is False

    @pytest.mark.asyncio
    async def test_get_users_skips_unknown_ids(self, unit_env):
        identity_service = await unit_env.get(IdentityService)
        alice = await seed_user(unit_env, "alice")
        bob = await seed_user(unit_env, "bob")

        users = await identity_service.get_users(
            [alice.id, bob.id, alice.id, UserId(uuid4())]
        )

        assert set(users) == {alice.id, bob.id}
        assert users[bob.id].username.root == "bob"

    @pytest.mark.asyncio
    async def test_get_users_empty(self, unit_env):
        identity_service = await unit_env.get(IdentityService)

        assert await identity_service.get_users([]) == {}

    @pytest.mark.asyncio
    async def test_get_items_batch(self, unit_env):
        identity_service = await unit_env.get(IdentityService)
        alice = await seed_user(unit_env, "alice")
        wallet = await seed_item(unit_env, alice, item_name="Wallet")
        keys = await seed_item(unit_env, alice, item_name="Keys")

        items = await identity_service.get_items(
            [wallet.id, keys.id, wallet.id, ItemId(uuid4())]
        )

        assert set(items) == {wallet.id, keys.id}
        assert items[keys.id].item_name == "Keys"
        assert await identity_service.get_items([]) == {}


class TestResolveHandles:
    """Tests for resolve_handles method."""

    @pytest.mark.asyncio
    async def test_order_of_first_mention_without_duplicates(self, unit_env):
        identity_service = await unit_env.get(IdentityService)
        alice = await seed_user(unit_env, "alice")
        bob = await seed_user(unit_env, "bob")

        users = await identity_service.resolve_handles(
            ["bob", "nobody", "alice", "bob"]
        )

        assert [u.id for u in users] == [bob.id, alice.id]

    @pytest.mark.asyncio
    async def test_no_handles(self, unit_env):
        identity_service = await unit_env.get(IdentityService)

        assert await identity_service.resolve_handles([]) == []

    @pytest.mark.asyncio
    async def test_case_insensitive_matching(self):
        user_repo = InMemoryUserRepository()
        identity_service = IdentityService(
            user_repository=user_repo,
            item_repository=InMemoryItemRepository(),
            mention_settings=MentionSettings(case_sensitive=False),
        )
        dana = await user_repo.save(
            User(id=UserId(uuid4()), name="Dana", username=Handle(root="Dana"))
        )

        users = await identity_service.resolve_handles(["dana", "DANA"])

        assert [u.id for u in users] == [dana.id]

    @pytest.mark.asyncio
    async def test_case_insensitive_prefers_exact_match(self):
        user_repo = InMemoryUserRepository()
        identity_service = IdentityService(
            user_repository=user_repo,
            item_repository=InMemoryItemRepository(),
            mention_settings=MentionSettings(case_sensitive=False),
        )
        lower = await user_repo.save(
            User(id=UserId(uuid4()), name="Alice", username=Handle(root="alice"))
        )
        upper = await user_repo.save(
            User(id=UserId(uuid4()), name="Alice", username=Handle(root="Alice"))
        )

        exact_lower = await identity_service.resolve_handles(["alice"])
        exact_upper = await identity_service.resolve_handles(["Alice"])
        neither = await identity_service.resolve_handles(["ALICE"])

        assert [u.id for u in exact_lower] == [lower.id]
        assert [u.id for u in exact_upper] == [upper.id]
        assert [u.id for u in neither] == [upper.id]
