"""Unit tests for JWT helpers."""

import pytest

from quill.config import AuthSettings
from quill.util.jwt import JWTError, create_token, verify_token

SECRET = "test-secret-long-enough-for-hs256-keys"


class TestJWT:
    """Tests for create_token and verify_token."""

    def test_round_trip_keeps_claims(self):
        settings = AuthSettings(jwt_secret=SECRET)

        token = create_token("user-1", "alice@example.com", settings)
        payload = verify_token(token, settings)

        assert payload.user_id == "user-1"
        assert payload.email == "alice@example.com"

    def test_expired_token_is_rejected(self):
        settings = AuthSettings(jwt_secret=SECRET, jwt_expiry_days=-1)
        token = create_token("user-1", "alice@example.com", settings)

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, settings)

    def test_token_signed_with_other_secret_is_rejected(self):
        token = create_token(
            "user-1", "alice@example.com", AuthSettings(jwt_secret=SECRET)
        )

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, AuthSettings(jwt_secret=SECRET + "-rotated"))

    def test_garbage_is_rejected(self):
        with pytest.raises(JWTError):
            verify_token("not-a-jwt", AuthSettings(jwt_secret=SECRET))
