"""Unit tests for DeleteCommentUseCase."""

import pytest

from lostfound.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from lostfound.domain.error import NotAuthorizedError, NotFoundError
from lostfound.domain.service import CommentService
from tests.factories import seed_item, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_cascade_count(self, unit_env):
        # Arrange
        delete_comment_use_case = await unit_env.get(DeleteCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        alice = await seed_user(unit_env, "alice")
        bob = await seed_user(unit_env, "bob")
        item = await seed_item(unit_env, alice)
        root = await comment_service.create_comment(
            item_id=item.id, author_id=alice.id, text="root"
        )
        await comment_service.create_comment(
            item_id=item.id, author_id=bob.id, text="reply", parent_id=root.id
        )

        # Act
        response = await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=str(root.id), actor_id=str(alice.id))
        )

        # Assert
        assert response.deleted_count == 2
        assert await comment_service.count_for_item(item.id) == 0

    @pytest.mark.asyncio
    async def test_reply_author_cannot_delete_root(self, unit_env):
        delete_comment_use_case = await unit_env.get(DeleteCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        alice = await seed_user(unit_env, "alice")
        bob = await seed_user(unit_env, "bob")
        item = await seed_item(unit_env, alice)
        root = await comment_service.create_comment(
            item_id=item.id, author_id=alice.id, text="root"
        )

        with pytest.raises(NotAuthorizedError):
            await delete_comment_use_case.execute(
                DeleteCommentRequest(comment_id=str(root.id), actor_id=str(bob.id))
            )
        assert await comment_service.count_for_item(item.id) == 1

    @pytest.mark.asyncio
    async def test_second_delete_is_not_found(self, unit_env):
        delete_comment_use_case = await unit_env.get(DeleteCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        alice = await seed_user(unit_env, "alice")
        item = await seed_item(unit_env, alice)
        comment = await comment_service.create_comment(
            item_id=item.id, author_id=alice.id, text="bye"
        )
        request = DeleteCommentRequest(
            comment_id=str(comment.id), actor_id=str(alice.id)
        )

        await delete_comment_use_case.execute(request)

        with pytest.raises(NotFoundError):
            await delete_comment_use_case.execute(request)
