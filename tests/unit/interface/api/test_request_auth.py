"""Unit tests for request authentication helpers."""

from uuid import uuid4

import pytest

from qna.config import AuthSettings
from qna.domain.service import JWTService
from qna.domain.value import UserId
from qna.interface.api.auth import extract_token, require_identity
from qna.interface.error import AuthenticationError


class TestExtractToken:
    """Tests for extract_token()."""

    def test_cookie_wins_over_header(self):
        assert extract_token("cookie-token", "Bearer header-token") == "cookie-token"

    def test_bearer_header_fallback(self):
        assert extract_token(None, "Bearer header-token") == "header-token"
        assert extract_token(None, "bearer header-token") == "header-token"

    @pytest.mark.parametrize("header", [None, "", "Basic abc", "Bearer "])
    def test_no_usable_token(self, header):
        assert extract_token(None, header) is None


class TestRequireIdentity:
    """Tests for require_identity()."""

    def test_resolves_identity_from_header(self):
        service = JWTService(AuthSettings())
        user_id = UserId(uuid4())
        token = service.create_token(user_id)

        identity = require_identity(service, None, f"Bearer {token}")

        assert identity.user_id == user_id

    def test_missing_token_raises(self):
        service = JWTService(AuthSettings())

        with pytest.raises(AuthenticationError, match="Authentication required"):
            require_identity(service, None, None)
