"""Token verification domain service."""

import logfire

from lostfound.config import AuthSettings
from lostfound.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Names the student behind a bearer token or auth cookie.

    Tokens are normally minted by the identity service. create_token exists
    for local tooling and tests that need a signed token for a seeded user.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str) -> str:
        """Sign a token for user_id with the shared secret."""
        return create_token(user_id, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Decode a token.

        Raises:
            JWTError: If the token is expired, forged or malformed
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Rejected student token", error=str(e))
                raise

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """Return the student ID in token, or None when there is no usable token."""
        if not token:
            return None
        try:
            payload = self.verify_token(token)
        except JWTError:
            return None
        return payload.user_id
