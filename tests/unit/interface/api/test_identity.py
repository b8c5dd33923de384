"""Unit tests for caller identity resolution."""

import pytest
from fastapi import HTTPException

from council.config import AuthSettings
from council.domain.service import JWTService
from council.domain.value import Principal
from council.interface.api.identity import extract_token, require_caller


class TestExtractToken:
    """Tests for extract_token."""

    def test_bearer_header_wins_over_cookie(self):
        assert extract_token("Bearer abc", "cookie") == "abc"

    def test_scheme_is_case_insensitive(self):
        assert extract_token("bearer abc", None) == "abc"

    def test_falls_back_to_cookie(self):
        assert extract_token(None, "cookie") == "cookie"
        assert extract_token("Basic xyz", "cookie") == "cookie"

    def test_nothing_presented(self):
        assert extract_token(None, None) is None


class TestRequireCaller:
    """Tests for require_caller."""

    def test_valid_token_yields_principal(self):
        service = JWTService(AuthSettings())
        token = service.create_token(Principal("alice"))

        assert require_caller(service, f"Bearer {token}", None, "vote") == Principal(
            "alice"
        )

    def test_missing_token_is_401(self):
        with pytest.raises(HTTPException) as exc_info:
            require_caller(JWTService(AuthSettings()), None, None, "vote")

        assert exc_info.value.status_code == 401
        assert "vote" in exc_info.value.detail
