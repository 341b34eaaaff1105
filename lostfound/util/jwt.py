"""Student session tokens.

The identity service signs a token carrying the student's id in the
`id` claim; this module only needs the shared secret to read it back.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from pydantic import BaseModel, Field, field_validator

from lostfound.config import AuthSettings

STUDENT_CLAIM = "id"


class TokenPayload(BaseModel):
    """Decoded claims of a student token."""

    user_id: str = Field(alias=STUDENT_CLAIM)
    exp: datetime

    @field_validator("user_id")
    @classmethod
    def validate_user_id(cls, v: str) -> str:
        """Student ids are UUIDs; anything else cannot name an actor."""
        return str(UUID(v))


class JWTError(Exception):
    """Token is missing a claim, expired, or signed with another key."""


def create_token(user_id: str, settings: AuthSettings) -> str:
    """Sign a token for a student, as the identity service would.

    Args:
        user_id: Student ID
        settings: Authentication settings

    Returns:
        Encoded JWT
    """
    claims = {
        STUDENT_CLAIM: user_id,
        "exp": datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry of a token and return its claims.

    Raises:
        JWTError: If the token is expired, forged or malformed
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", STUDENT_CLAIM]},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError as e:
        raise JWTError(f"Invalid token: {e}")

    try:
        return TokenPayload.model_validate(claims)
    except ValueError as e:
        raise JWTError(f"Invalid token claims: {e}")
