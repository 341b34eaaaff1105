"""Unit tests for the comment listing and counting use cases."""

from uuid import uuid4

import pytest

from lostfound.application.usecase.comment import (
    CountItemCommentsUseCase,
    CountUserCommentsUseCase,
    GetItemCommentsRequest,
    GetItemCommentsUseCase,
    GetMentionsUseCase,
    GetRepliesRequest,
    GetRepliesUseCase,
    GetUserCommentsRequest,
    GetUserCommentsUseCase,
)
from lostfound.domain.error import NotFoundError
from lostfound.domain.service import CommentService
from tests.factories import seed_item, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetItemCommentsUseCase:
    @pytest.mark.asyncio
    async def test_raw_paging_values_are_normalized(self, unit_env):
        """Junk page/limit values fall back to page 1 and the default limit."""
        # Arrange
        use_case = await unit_env.get(GetItemCommentsUseCase)
        comment_service = await unit_env.get(CommentService)
        alice = await seed_user(unit_env, "alice")
        item = await seed_item(unit_env, alice)
        for i in range(12):
            await comment_service.create_comment(
                item_id=item.id, author_id=alice.id, text=f"comment {i}"
            )

        # Act
        result = await use_case.execute(
            GetItemCommentsRequest(item_id=str(item.id), page="abc", limit="-3")
        )

        # Assert
        assert result.page == 1
        assert result.count == 10
        assert result.total == 12
        assert result.pages == 2
        assert result.comments[0].text == "comment 11"

    @pytest.mark.asyncio
    async def test_reply_counts_on_roots(self, unit_env):
        use_case = await unit_env.get(GetItemCommentsUseCase)
        comment_service = await unit_env.get(CommentService)
        alice = await seed_user(unit_env, "alice")
        item = await seed_item(unit_env, alice)
        root = await comment_service.create_comment(
            item_id=item.id, author_id=alice.id, text="root"
        )
        await comment_service.create_comment(
            item_id=item.id, author_id=alice.id, text="reply", parent_id=root.id
        )

        result = await use_case.execute(GetItemCommentsRequest(item_id=str(item.id)))

        assert [c.id for c in result.comments] == [str(root.id)]
        assert result.comments[0].reply_count == 1
        assert result.comments[0].author.username == "alice"
        assert result.comments[0].item is None

    @pytest.mark.asyncio
    async def test_unknown_item(self, unit_env):
        use_case = await unit_env.get(GetItemCommentsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetItemCommentsRequest(item_id=str(uuid4())))


class TestGetRepliesUseCase:
    @pytest.mark.asyncio
    async def test_second_page(self, unit_env):
        use_case = await unit_env.get(GetRepliesUseCase)
        comment_service = await unit_env.get(CommentService)
        alice = await seed_user(unit_env, "alice")
        item = await seed_item(unit_env, alice)
        root = await comment_service.create_comment(
            item_id=item.id, author_id=alice.id, text="root"
        )
        for i in range(3):
            await comment_service.create_comment(
                item_id=item.id, author_id=alice.id, text=f"r{i}", parent_id=root.id
            )

        result = await use_case.execute(
            GetRepliesRequest(comment_id=str(root.id), page=2, limit=2)
        )

        assert [c.text for c in result.comments] == ["r2"]
        assert result.total == 3
        assert result.pages == 2


class TestUserListings:
    @pytest.mark.asyncio
    async def test_authored_and_mentioned(self, unit_env):
        authored_use_case = await unit_env.get(GetUserCommentsUseCase)
        mentions_use_case = await unit_env.get(GetMentionsUseCase)
        comment_service = await unit_env.get(CommentService)
        alice = await seed_user(unit_env, "alice")
        bob = await seed_user(unit_env, "bob")
        item = await seed_item(unit_env, alice)
        await comment_service.create_comment(
            item_id=item.id, author_id=alice.id, text="hey @bob"
        )
        await comment_service.create_comment(
            item_id=item.id, author_id=bob.id, text="hi"
        )

        authored = await authored_use_case.execute(
            GetUserCommentsRequest(user_id=str(bob.id))
        )
        mentioned = await mentions_use_case.execute(
            GetUserCommentsRequest(user_id=str(bob.id))
        )

        assert [c.text for c in authored.comments] == ["hi"]
        assert [c.text for c in mentioned.comments] == ["hey @bob"]
        assert mentioned.comments[0].mentioned_users[0].username == "bob"
        assert authored.comments[0].item.item_name == "Blue backpack"
        assert mentioned.comments[0].item.id == str(item.id)


class TestCountUseCases:
    @pytest.mark.asyncio
    async def test_counts(self, unit_env):
        count_item = await unit_env.get(CountItemCommentsUseCase)
        count_user = await unit_env.get(CountUserCommentsUseCase)
        comment_service = await unit_env.get(CommentService)
        alice = await seed_user(unit_env, "alice")
        item = await seed_item(unit_env, alice)
        root = await comment_service.create_comment(
            item_id=item.id, author_id=alice.id, text="root"
        )
        await comment_service.create_comment(
            item_id=item.id, author_id=alice.id, text="reply", parent_id=root.id
        )

        assert (await count_item.execute(str(item.id))).count == 2
        assert (await count_user.execute(str(alice.id))).count == 2
        assert (await count_item.execute(str(uuid4()))).count == 0
