"""Unit tests for UpdateCommentUseCase."""

from uuid import uuid4

import pytest

from lostfound.application.usecase.comment.update_comment import (
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from lostfound.domain.error import NotAuthorizedError, NotFoundError
from lostfound.domain.service import CommentService
from tests.factories import seed_item, seed_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        """Editing replaces text, refreshes mentions and marks the comment edited."""
        # Arrange
        update_comment_use_case = await unit_env.get(UpdateCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        alice = await seed_user(unit_env, "alice")
        await seed_user(unit_env, "bob")
        carol = await seed_user(unit_env, "carol", name="Carol King")
        item = await seed_item(unit_env, alice)
        comment = await comment_service.create_comment(
            item_id=item.id, author_id=alice.id, text="ask @bob"
        )

        # Act
        response = await update_comment_use_case.execute(
            UpdateCommentRequest(
                comment_id=str(comment.id),
                actor_id=str(alice.id),
                text="ask @carol instead",
            )
        )

        # Assert
        assert response.comment.text == "ask @carol instead"
        assert response.comment.is_edited is True
        assert response.comment.edited_at is not None
        assert [u.id for u in response.comment.mentioned_users] == [str(carol.id)]
        assert response.comment.mentioned_users[0].name == "Carol King"

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        update_comment_use_case = await unit_env.get(UpdateCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        alice = await seed_user(unit_env, "alice")
        mallory = await seed_user(unit_env, "mallory")
        item = await seed_item(unit_env, alice)
        comment = await comment_service.create_comment(
            item_id=item.id, author_id=alice.id, text="original"
        )

        with pytest.raises(NotAuthorizedError) as exc_info:
            await update_comment_use_case.execute(
                UpdateCommentRequest(
                    comment_id=str(comment.id),
                    actor_id=str(mallory.id),
                    text="changed",
                )
            )

        assert exc_info.value.action == "update"
        stored = await comment_service.get_comment(comment.id)
        assert stored.text == "original"

    @pytest.mark.asyncio
    async def test_unknown_comment(self, unit_env):
        update_comment_use_case = await unit_env.get(UpdateCommentUseCase)
        alice = await seed_user(unit_env, "alice")

        with pytest.raises(NotFoundError):
            await update_comment_use_case.execute(
                UpdateCommentRequest(
                    comment_id=str(uuid4()), actor_id=str(alice.id), text="x"
                )
            )
