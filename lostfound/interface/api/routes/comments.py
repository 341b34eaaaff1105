"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status

from lostfound.application.usecase.comment import (
    CommentItem,
    CommentPageResponse,
    CountItemCommentsUseCase,
    CountUserCommentsUseCase,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetItemCommentsRequest,
    GetItemCommentsUseCase,
    GetMentionsUseCase,
    GetRepliesRequest,
    GetRepliesUseCase,
    GetUserCommentsRequest,
    GetUserCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from lostfound.application.usecase.comment.common import CamelModel
from lostfound.application.usecase.like import (
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from lostfound.domain.service import JWTService
from lostfound.interface.api.actor import check_acting_as, require_actor
from lostfound.interface.api.envelope import (
    CountResponse,
    DataResponse,
    ListResponse,
    MessageResponse,
)

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(CamelModel):
    """API request for creating a comment."""

    text: str
    item_id: str
    author_id: str | None = None  # Defaults to the authenticated user
    parent_comment_id: str | None = None  # Root comment ID for replies


class UpdateCommentAPIRequest(CamelModel):
    """API request for editing a comment."""

    text: str


class ToggleLikeAPIRequest(CamelModel):
    """API request for liking a comment."""

    actor_id: str | None = None  # Defaults to the authenticated user


def _list_response(page: CommentPageResponse) -> ListResponse[CommentItem]:
    return ListResponse[CommentItem](
        count=page.count,
        total=page.total,
        page=page.page,
        pages=page.pages,
        data=page.comments,
    )


# ============================================================================
# Mutations (authenticated)
# ============================================================================


@router.post(
    "",
    response_model=DataResponse[CommentItem],
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> DataResponse[CommentItem]:
    """Comment on an item, or reply to a root comment.

    Mentions (@username) in the text are resolved to registered users.

    Args:
        request: Comment text, item and optional parent comment
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service from DI
        authorization: "Bearer <token>" header
        auth_token: Token cookie, used when no header is sent

    Returns:
        The created comment with author and mentions populated

    Raises:
        AuthenticationError: If no valid token is presented (401)
        ForbiddenError: If authorId names someone other than the caller (403)
        NotFoundError: If the item or parent comment does not exist (404)
        ValidationError: If the text is blank or too long, or the parent
            is itself a reply (400)

    Example:
        POST /comments
        {"text": "Is this yours @alice?", "itemId": "..."}
    """
    actor_id = require_actor(jwt_service, authorization, auth_token)
    check_acting_as(actor_id, request.author_id)

    result = await create_comment_use_case.execute(
        CreateCommentRequest(
            item_id=request.item_id,
            text=request.text,
            author_id=actor_id,
            parent_id=request.parent_comment_id,
        )
    )
    return DataResponse[CommentItem](data=result.comment)


@router.put("/{comment_id}", response_model=DataResponse[CommentItem])
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> DataResponse[CommentItem]:
    """Edit a comment's text.

    Mentions are re-resolved from the new text and the comment is marked
    as edited.

    Args:
        comment_id: Comment to edit
        request: New text
        update_comment_use_case: Update comment use case from DI
        jwt_service: JWT service from DI
        authorization: "Bearer <token>" header
        auth_token: Token cookie, used when no header is sent

    Returns:
        The edited comment

    Raises:
        AuthenticationError: If no valid token is presented (401)
        NotAuthorizedError: If the caller did not write the comment (403)
        NotFoundError: If the comment does not exist (404)
        ValidationError: If the new text is blank or too long (400)
    """
    actor_id = require_actor(jwt_service, authorization, auth_token)

    result = await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id, actor_id=actor_id, text=request.text
        )
    )
    return DataResponse[CommentItem](data=result.comment)


@router.delete("/{comment_id}", response_model=MessageResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> MessageResponse:
    """Delete a comment. Deleting a root comment also deletes its replies.

    Args:
        comment_id: Comment to delete
        delete_comment_use_case: Delete comment use case from DI
        jwt_service: JWT service from DI
        authorization: "Bearer <token>" header
        auth_token: Token cookie, used when no header is sent

    Returns:
        Confirmation message

    Raises:
        AuthenticationError: If no valid token is presented (401)
        NotAuthorizedError: If the caller did not write the comment (403)
        NotFoundError: If the comment does not exist (404)
    """
    actor_id = require_actor(jwt_service, authorization, auth_token)

    await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, actor_id=actor_id)
    )
    return MessageResponse(message="Comment deleted successfully")


@router.post("/{comment_id}/like", response_model=DataResponse[ToggleLikeResponse])
async def toggle_like(
    comment_id: str,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    request: ToggleLikeAPIRequest | None = None,
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> DataResponse[ToggleLikeResponse]:
    """Like a comment, or remove the caller's like if already liked.

    Args:
        comment_id: Comment to like or unlike
        toggle_like_use_case: Toggle like use case from DI
        jwt_service: JWT service from DI
        request: Optional body; actorId must name the caller if given
        authorization: "Bearer <token>" header
        auth_token: Token cookie, used when no header is sent

    Returns:
        Whether the caller now likes the comment, the like count and the
        comment with its likers populated

    Raises:
        AuthenticationError: If no valid token is presented (401)
        ForbiddenError: If actorId names someone other than the caller (403)
        NotFoundError: If the comment does not exist (404)
    """
    actor_id = require_actor(jwt_service, authorization, auth_token)
    check_acting_as(actor_id, request.actor_id if request else None)

    result = await toggle_like_use_case.execute(
        ToggleLikeRequest(comment_id=comment_id, actor_id=actor_id)
    )
    return DataResponse[ToggleLikeResponse](data=result)


# ============================================================================
# Reads (public)
# ============================================================================


@router.get("/item/{item_id}", response_model=ListResponse[CommentItem])
async def get_item_comments(
    item_id: str,
    get_item_comments_use_case: FromDishka[GetItemCommentsUseCase],
    include_replies: str | None = Query(default=None, alias="includeReplies"),
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
) -> ListResponse[CommentItem]:
    """List comments on an item, newest first.

    Args:
        item_id: Item whose comments to list
        get_item_comments_use_case: Get item comments use case from DI
        include_replies: "true" to list replies alongside root comments;
            any other value lists root comments only, each with its reply
            count
        page: 1-based page number; invalid values fall back to 1
        limit: Page size; invalid values fall back to the default

    Returns:
        One page of comments with paging totals

    Raises:
        NotFoundError: If the item does not exist (404)

    Example:
        GET /comments/item/{item_id}?page=2&limit=5
    """
    result = await get_item_comments_use_case.execute(
        GetItemCommentsRequest(
            item_id=item_id,
            include_replies=include_replies == "true",
            page=page,
            limit=limit,
        )
    )
    return _list_response(result)


@router.get("/item/{item_id}/count", response_model=CountResponse)
async def count_item_comments(
    item_id: str,
    count_use_case: FromDishka[CountItemCommentsUseCase],
) -> CountResponse:
    """Count all comments (roots and replies) on an item.

    Args:
        item_id: Item whose comments to count
        count_use_case: Count item comments use case from DI

    Returns:
        Comment count; 0 for an unknown item

    Raises:
        NotFoundError: If the ID is not a valid UUID (404)
    """
    result = await count_use_case.execute(item_id)
    return CountResponse(count=result.count)


@router.get("/student/{user_id}", response_model=ListResponse[CommentItem])
async def get_user_comments(
    user_id: str,
    get_user_comments_use_case: FromDishka[GetUserCommentsUseCase],
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
) -> ListResponse[CommentItem]:
    """List comments written by a student, newest first.

    Each comment carries a summary of the item it was posted on.

    Args:
        user_id: Author whose comments to list
        get_user_comments_use_case: Get user comments use case from DI
        page: 1-based page number; invalid values fall back to 1
        limit: Page size; invalid values fall back to the default

    Returns:
        One page of comments with paging totals

    Raises:
        NotFoundError: If the ID is not a valid UUID (404)
    """
    result = await get_user_comments_use_case.execute(
        GetUserCommentsRequest(user_id=user_id, page=page, limit=limit)
    )
    return _list_response(result)


@router.get("/student/{user_id}/count", response_model=CountResponse)
async def count_user_comments(
    user_id: str,
    count_use_case: FromDishka[CountUserCommentsUseCase],
) -> CountResponse:
    """Count comments written by a student.

    Args:
        user_id: Author whose comments to count
        count_use_case: Count user comments use case from DI

    Returns:
        Comment count; 0 for an unknown student

    Raises:
        NotFoundError: If the ID is not a valid UUID (404)
    """
    result = await count_use_case.execute(user_id)
    return CountResponse(count=result.count)


@router.get("/mentions/{user_id}", response_model=ListResponse[CommentItem])
async def get_mentions(
    user_id: str,
    get_mentions_use_case: FromDishka[GetMentionsUseCase],
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
) -> ListResponse[CommentItem]:
    """List comments that mention a student, newest first.

    Each comment carries a summary of the item it was posted on.

    Args:
        user_id: Mentioned student
        get_mentions_use_case: Get mentions use case from DI
        page: 1-based page number; invalid values fall back to 1
        limit: Page size; invalid values fall back to the default

    Returns:
        One page of comments with paging totals

    Raises:
        NotFoundError: If the ID is not a valid UUID (404)
    """
    result = await get_mentions_use_case.execute(
        GetUserCommentsRequest(user_id=user_id, page=page, limit=limit)
    )
    return _list_response(result)


@router.get("/{comment_id}/replies", response_model=ListResponse[CommentItem])
async def get_replies(
    comment_id: str,
    get_replies_use_case: FromDishka[GetRepliesUseCase],
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
) -> ListResponse[CommentItem]:
    """List replies to a comment, oldest first.

    Args:
        comment_id: Root comment whose replies to list
        get_replies_use_case: Get replies use case from DI
        page: 1-based page number; invalid values fall back to 1
        limit: Page size; invalid values fall back to the default

    Returns:
        One page of replies with paging totals

    Raises:
        NotFoundError: If the comment does not exist (404)
    """
    result = await get_replies_use_case.execute(
        GetRepliesRequest(comment_id=comment_id, page=page, limit=limit)
    )
    return _list_response(result)
