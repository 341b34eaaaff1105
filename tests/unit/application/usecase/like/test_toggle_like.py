"""Unit tests for ToggleLikeUseCase."""

import pytest

from lostfound.application.usecase.like import ToggleLikeRequest, ToggleLikeUseCase
from lostfound.domain.error import NotFoundError
from lostfound.domain.service import CommentService
from tests.factories import seed_item, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestToggleLikeUseCase:
    @pytest.mark.asyncio
    async def test_like_then_unlike(self, unit_env):
        # Arrange
        toggle_like_use_case = await unit_env.get(ToggleLikeUseCase)
        comment_service = await unit_env.get(CommentService)
        alice = await seed_user(unit_env, "alice")
        bob = await seed_user(unit_env, "bob")
        item = await seed_item(unit_env, alice)
        comment = await comment_service.create_comment(
            item_id=item.id, author_id=alice.id, text="Found your keys"
        )
        request = ToggleLikeRequest(comment_id=str(comment.id), actor_id=str(bob.id))

        # Act
        liked = await toggle_like_use_case.execute(request)
        unliked = await toggle_like_use_case.execute(request)

        # Assert
        assert liked.liked is True
        assert liked.like_count == 1
        assert [u.id for u in liked.comment.likes] == [str(bob.id)]
        assert liked.comment.likes[0].username == "bob"
        assert liked.model_dump(by_alias=True)["likeCount"] == 1

        assert unliked.liked is False
        assert unliked.like_count == 0
        assert unliked.comment.likes == []

    @pytest.mark.asyncio
    async def test_malformed_comment_id(self, unit_env):
        toggle_like_use_case = await unit_env.get(ToggleLikeUseCase)
        bob = await seed_user(unit_env, "bob")

        with pytest.raises(NotFoundError):
            await toggle_like_use_case.execute(
                ToggleLikeRequest(comment_id="xyz", actor_id=str(bob.id))
            )
