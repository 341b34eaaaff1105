"""Resolve the acting user from request credentials."""

import logfire

from lostfound.domain.service import JWTService
from lostfound.interface.error import AuthenticationError, ForbiddenError


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an `Authorization: Bearer <token>` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def require_actor(
    jwt_service: JWTService,
    authorization: str | None,
    auth_token: str | None,
) -> str:
    """Return the authenticated user ID.

    The Authorization header wins over the auth_token cookie.

    Raises:
        AuthenticationError: If no valid token is present
    """
    token = bearer_token(authorization) or auth_token
    user_id = jwt_service.get_user_id_from_token(token)
    if not user_id:
        raise AuthenticationError("Authentication required")
    return user_id


def check_acting_as(actor_id: str, claimed_id: str | None) -> None:
    """Reject a body that names a different user than the token.

    Raises:
        ForbiddenError: If claimed_id is set and differs from actor_id
    """
    if claimed_id and claimed_id != actor_id:
        logfire.warn(
            "Caller tried to act as another user",
            actor_id=actor_id,
            claimed_id=claimed_id,
        )
        raise ForbiddenError("Cannot act on behalf of another user")
