"""Comment count use cases exposed to the item and profile pages."""

from pydantic import BaseModel

from lostfound.domain.service import CommentService
from lostfound.domain.value import ItemId, UserId, parse_uuid


class CountCommentsResponse(BaseModel):
    """Comment count response."""

    count: int


class CountItemCommentsUseCase:
    """Use case for counting all comments (roots and replies) on an item."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, item_id: str) -> CountCommentsResponse:
        """Count comments on an item; unknown items have none."""
        count = await self.comment_service.count_for_item(
            ItemId(parse_uuid(item_id, "Item"))
        )
        return CountCommentsResponse(count=count)


class CountUserCommentsUseCase:
    """Use case for counting the comments a user wrote."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, user_id: str) -> CountCommentsResponse:
        """Count comments by a user; unknown users have none."""
        count = await self.comment_service.count_for_author(
            UserId(parse_uuid(user_id, "User"))
        )
        return CountCommentsResponse(count=count)
