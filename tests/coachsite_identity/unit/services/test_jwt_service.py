"""Unit tests for JWTService."""

from datetime import timedelta
from uuid import uuid4

import jwt
import pytest

from coachsite_identity import InvalidTokenError, JWTService


class TestJWTServiceInit:
    def test_init_with_empty_secret_raises(self):
        """Test that empty secret raises ValueError."""
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTService(secret_key="")


class TestSessionTokens:
    """Tests for token creation and verification."""

    def setup_method(self):
        self.service = JWTService(secret_key="test-secret-key-12345")
        self.user_id = uuid4()

    def test_round_trip_carries_id_and_role(self):
        token = self.service.create_access_token(self.user_id, "admin")

        payload = self.service.verify_token(token)

        assert payload.user_id == self.user_id
        assert payload.role == "admin"
        assert not payload.is_expired()

    def test_default_lifetime_is_seven_days(self):
        token = self.service.create_access_token(self.user_id, "user")
        claims = jwt.decode(token, options={"verify_signature": False})

        assert claims["exp"] - claims["iat"] == int(timedelta(days=7).total_seconds())

    def test_expired_token_rejected(self):
        token = self.service.create_access_token(
            self.user_id,
            "user",
            expires_delta=timedelta(seconds=-1),
        )

        with pytest.raises(InvalidTokenError, match="expired"):
            self.service.verify_token(token)

    def test_wrong_secret_rejected(self):
        other = JWTService(secret_key="another-secret")
        token = other.create_access_token(self.user_id, "user")

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_garbage_rejected(self):
        with pytest.raises(InvalidTokenError):
            self.service.verify_token("not.a.token")

    def test_missing_claims_rejected(self):
        token = jwt.encode({"sub": "not-a-uuid"}, "test-secret-key-12345")

        with pytest.raises(InvalidTokenError, match="Malformed"):
            self.service.verify_token(token)
