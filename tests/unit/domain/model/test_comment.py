"""Unit tests for the Comment entity."""

from datetime import datetime
from uuid import uuid4

import pytest
from pydantic import ValidationError

from lostfound.domain.model import Comment
from lostfound.domain.value import CommentId, ItemId, UserId


def make_comment(**overrides) -> Comment:
    fields = {
        "id": CommentId(uuid4()),
        "item_id": ItemId(uuid4()),
        "author_id": UserId(uuid4()),
        "text": "Found a wallet",
    }
    fields.update(overrides)
    return Comment(**fields)


class TestCommentInvariants:
    def test_defaults(self):
        comment = make_comment()

        assert comment.parent_id is None
        assert comment.is_reply is False
        assert comment.like_count == 0
        assert comment.is_edited is False
        assert comment.reply_count is None

    def test_reply_flag_must_match_parent(self):
        with pytest.raises(ValidationError):
            make_comment(parent_id=CommentId(uuid4()), is_reply=False)
        with pytest.raises(ValidationError):
            make_comment(is_reply=True)

    def test_edit_flag_must_match_timestamp(self):
        with pytest.raises(ValidationError):
            make_comment(is_edited=True)
        with pytest.raises(ValidationError):
            make_comment(edited_at=datetime.now())

    def test_author_cannot_be_mentioned(self):
        author_id = UserId(uuid4())

        with pytest.raises(ValidationError):
            make_comment(author_id=author_id, mentioned_user_ids=[author_id])

    def test_mentions_are_unique(self):
        other = UserId(uuid4())

        with pytest.raises(ValidationError):
            make_comment(mentioned_user_ids=[other, other])

    def test_like_count_follows_likers(self):
        likers = frozenset({UserId(uuid4()), UserId(uuid4())})

        assert make_comment(liker_ids=likers).like_count == 2

    def test_empty_text_rejected(self):
        with pytest.raises(ValidationError):
            make_comment(text="")
