"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .identity_service import IdentityService
from .jwt_service import JWTService
from .like_service import LikeService, LikeToggleResult

__all__ = [
    "CommentService",
    "IdentityService",
    "JWTService",
    "LikeService",
    "LikeToggleResult",
    "Service",
]
