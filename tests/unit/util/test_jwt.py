"""Unit tests for JWT utilities."""

import pytest

from forumhub.config import AuthSettings
from forumhub.util.jwt import JWTError, create_token, verify_token

SETTINGS = AuthSettings(jwt_secret="unit-test-secret-that-is-long-enough-for-hs256")


class TestJWT:
    """Tests for create_token and verify_token."""

    def test_round_trip_payload(self):
        token = create_token("user-1", "alice@example.com", SETTINGS)

        payload = verify_token(token, SETTINGS)

        assert payload.user_id == "user-1"
        assert payload.email == "alice@example.com"

    def test_expired_token_rejected(self):
        expired = AuthSettings(jwt_secret=SETTINGS.jwt_secret, jwt_expiry_hours=-1)
        token = create_token("user-1", "alice@example.com", expired)

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, SETTINGS)

    def test_wrong_secret_rejected(self):
        other = AuthSettings(jwt_secret="another-secret-that-is-also-long-enough-ok")
        token = create_token("user-1", "alice@example.com", other)

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, SETTINGS)

    def test_garbage_rejected(self):
        with pytest.raises(JWTError):
            verify_token("not.a.jwt", SETTINGS)
