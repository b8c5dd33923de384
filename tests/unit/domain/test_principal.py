"""Unit tests for the Principal value object."""

import pytest
from pydantic import ValidationError

from council.domain.value import Principal


class TestPrincipal:
    """Tests for Principal validation."""

    def test_equal_text_means_equal_principal(self):
        assert Principal("alice") == Principal("alice")
        assert Principal("alice") != Principal("bob")

    def test_rejects_blank(self):
        with pytest.raises(ValidationError):
            Principal("   ")

    def test_rejects_overlong(self):
        with pytest.raises(ValidationError):
            Principal("x" * 256)
