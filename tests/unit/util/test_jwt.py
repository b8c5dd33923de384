"""Unit tests for JWT utilities and JWTService."""

import pytest

from council.config import AuthSettings
from council.domain.service import JWTService
from council.domain.value import Principal
from council.util.jwt import JWTError, create_token, verify_token


class TestJWT:
    """Tests for token creation and verification."""

    def test_token_carries_principal_as_subject(self):
        settings = AuthSettings(jwt_secret="test-secret-that-is-long-enough-for-hs256")

        token = create_token("alice", settings)

        assert verify_token(token, settings).sub == "alice"

    def test_wrong_secret_is_rejected(self):
        token = create_token(
            "alice", AuthSettings(jwt_secret="one-secret-that-is-long-enough-1234")
        )

        with pytest.raises(JWTError):
            verify_token(
                token, AuthSettings(jwt_secret="another-secret-long-enough-5678")
            )

    def test_expired_token_is_rejected(self):
        settings = AuthSettings(jwt_expiry_days=-1)

        with pytest.raises(JWTError, match="expired"):
            verify_token(create_token("alice", settings), settings)


class TestJWTService:
    """Tests for JWTService principal extraction."""

    def test_get_principal_from_valid_token(self):
        service = JWTService(AuthSettings())
        token = service.create_token(Principal("bob"))

        assert service.get_principal_from_token(token) == Principal("bob")

    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    def test_missing_or_invalid_token_is_unauthenticated(self, token):
        service = JWTService(AuthSettings())

        assert service.get_principal_from_token(token) is None
