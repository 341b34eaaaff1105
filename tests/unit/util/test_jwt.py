"""Unit tests for student token handling."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from lostfound.config import AuthSettings
from lostfound.domain.service import JWTService
from lostfound.util.jwt import JWTError, create_token, verify_token

SETTINGS = AuthSettings(jwt_secret="test-secret")


class TestVerifyToken:
    def test_round_trip_uses_id_claim(self):
        user_id = str(uuid4())

        token = create_token(user_id, SETTINGS)

        claims = jwt.decode(token, "test-secret", algorithms=["HS256"])
        assert claims["id"] == user_id
        assert verify_token(token, SETTINGS).user_id == user_id

    def test_expired(self):
        token = jwt.encode(
            {"id": str(uuid4()), "exp": datetime.now(timezone.utc) - timedelta(1)},
            "test-secret",
            algorithm="HS256",
        )

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, SETTINGS)

    def test_wrong_secret(self):
        token = create_token(str(uuid4()), AuthSettings(jwt_secret="other"))

        with pytest.raises(JWTError):
            verify_token(token, SETTINGS)

    @pytest.mark.parametrize(
        "claims",
        [
            {"user": "someone"},
            {"id": "not-a-uuid"},
        ],
    )
    def test_bad_claims(self, claims):
        claims["exp"] = datetime.now(timezone.utc) + timedelta(days=1)
        token = jwt.encode(claims, "test-secret", algorithm="HS256")

        with pytest.raises(JWTError):
            verify_token(token, SETTINGS)


class TestJWTService:
    def test_user_id_or_none(self):
        jwt_service = JWTService(auth_settings=SETTINGS)
        user_id = str(uuid4())

        assert jwt_service.get_user_id_from_token(
            jwt_service.create_token(user_id)
        ) == user_id
        assert jwt_service.get_user_id_from_token(None) is None
        assert jwt_service.get_user_id_from_token("") is None
        assert jwt_service.get_user_id_from_token("garbage") is None
