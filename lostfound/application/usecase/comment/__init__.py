"""Comment use cases."""

from .common import CommentItem, CommentPageResponse
from .count_comments import (
    CountCommentsResponse,
    CountItemCommentsUseCase,
    CountUserCommentsUseCase,
)
from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comments import (
    GetItemCommentsRequest,
    GetItemCommentsUseCase,
    GetRepliesRequest,
    GetRepliesUseCase,
)
from .get_user_comments import (
    GetMentionsUseCase,
    GetUserCommentsRequest,
    GetUserCommentsUseCase,
)
from .update_comment import (
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)

__all__ = [
    "CommentItem",
    "CommentPageResponse",
    "CountCommentsResponse",
    "CountItemCommentsUseCase",
    "CountUserCommentsUseCase",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetItemCommentsRequest",
    "GetItemCommentsUseCase",
    "GetMentionsUseCase",
    "GetRepliesRequest",
    "GetRepliesUseCase",
    "GetUserCommentsRequest",
    "GetUserCommentsUseCase",
    "UpdateCommentRequest",
    "UpdateCommentResponse",
    "UpdateCommentUseCase",
]
