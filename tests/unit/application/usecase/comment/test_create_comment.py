"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from lostfound.application.usecase.comment.create_comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from lostfound.domain.error import NotFoundError, ValidationError
from lostfound.domain.repository import CommentFilter, CommentRepository
from lostfound.domain.value import CommentId
from tests.factories import seed_item, seed_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_response_populates_author_and_mentions(self, unit_env):
        """Created comment comes back with author and mentioned users filled in."""
        # Arrange
        create_comment_use_case = await unit_env.get(CreateCommentUseCase)
        alice = await seed_user(unit_env, "alice", name="Alice Smith")
        bob = await seed_user(unit_env, "bob", name="Bob Jones")
        item = await seed_item(unit_env, alice)

        request = CreateCommentRequest(
            item_id=str(item.id),
            text="@bob did you see a blue backpack?",
            author_id=str(alice.id),
        )

        # Act
        response = await create_comment_use_case.execute(request)

        # Assert
        comment = response.comment
        assert comment.text == "@bob did you see a blue backpack?"
        assert comment.item_id == str(item.id)
        assert comment.author is not None
        assert comment.author.id == str(alice.id)
        assert comment.author.name == "Alice Smith"
        assert comment.author.username == "alice"
        assert [u.username for u in comment.mentioned_users] == ["bob"]
        assert comment.mentioned_users[0].id == str(bob.id)
        assert comment.parent_comment_id is None
        assert comment.is_reply is False
        assert comment.likes == []
        assert comment.like_count == 0
        assert comment.is_edited is False

    @pytest.mark.asyncio
    async def test_reply(self, unit_env):
        create_comment_use_case = await unit_env.get(CreateCommentUseCase)
        alice = await seed_user(unit_env, "alice")
        item = await seed_item(unit_env, alice)
        root = await create_comment_use_case.execute(
            CreateCommentRequest(
                item_id=str(item.id), text="root", author_id=str(alice.id)
            )
        )

        response = await create_comment_use_case.execute(
            CreateCommentRequest(
                item_id=str(item.id),
                text="reply",
                author_id=str(alice.id),
                parent_id=root.comment.id,
            )
        )

        assert response.comment.parent_comment_id == root.comment.id
        assert response.comment.is_reply is True

    @pytest.mark.asyncio
    async def test_serializes_camel_case(self, unit_env):
        create_comment_use_case = await unit_env.get(CreateCommentUseCase)
        alice = await seed_user(unit_env, "alice")
        item = await seed_item(unit_env, alice)

        response = await create_comment_use_case.execute(
            CreateCommentRequest(
                item_id=str(item.id), text="hello", author_id=str(alice.id)
            )
        )

        data = response.comment.model_dump(by_alias=True)
        assert "itemId" in data
        assert "mentionedUsers" in data
        assert "parentCommentId" in data
        assert "likeCount" in data
        assert "profilePicture" in data["author"]

    @pytest.mark.asyncio
    async def test_malformed_item_id_is_not_found(self, unit_env):
        create_comment_use_case = await unit_env.get(CreateCommentUseCase)
        alice = await seed_user(unit_env, "alice")

        with pytest.raises(NotFoundError) as exc_info:
            await create_comment_use_case.execute(
                CreateCommentRequest(
                    item_id="not-a-uuid", text="hello", author_id=str(alice.id)
                )
            )
        assert exc_info.value.public_message == "Item not found"

    @pytest.mark.asyncio
    async def test_unknown_parent(self, unit_env):
        create_comment_use_case = await unit_env.get(CreateCommentUseCase)
        alice = await seed_user(unit_env, "alice")
        item = await seed_item(unit_env, alice)

        with pytest.raises(NotFoundError):
            await create_comment_use_case.execute(
                CreateCommentRequest(
                    item_id=str(item.id),
                    text="hello",
                    author_id=str(alice.id),
                    parent_id=str(CommentId(uuid4())),
                )
            )

    @pytest.mark.asyncio
    async def test_blank_text_persists_nothing(self, unit_env):
        create_comment_use_case = await unit_env.get(CreateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        alice = await seed_user(unit_env, "alice")
        item = await seed_item(unit_env, alice)

        with pytest.raises(ValidationError):
            await create_comment_use_case.execute(
                CreateCommentRequest(
                    item_id=str(item.id), text="   ", author_id=str(alice.id)
                )
            )

        assert await comment_repo.count(CommentFilter(item_id=item.id)) == 0
