"""Tests for token validation and the ownership check."""

import pytest

from recommender.auth import authorize, decode_token
from recommender.exceptions import ForbiddenAccessError, InvalidTokenError, TokenExpiredError
from tests.conftest import make_token


class TestDecodeToken:
    """Tests for decode_token."""

    def test_valid_token(self):
        identity = decode_token(make_token(42, email="someone@example.com"))

        assert identity.user_id == 42
        assert identity.email == "someone@example.com"

    def test_numeric_string_user_id(self):
        assert decode_token(make_token("17")).user_id == 17

    def test_expired_token(self):
        with pytest.raises(TokenExpiredError):
            decode_token(make_token(1, expires_in=-60))

    def test_wrong_signature(self):
        token = make_token(1, secret="another-secret-that-is-at-least-32-chars")
        with pytest.raises(InvalidTokenError):
            decode_token(token)

    @pytest.mark.parametrize("token", ["", "not-a-token", "a.b.c"])
    def test_malformed_token(self, token: str):
        with pytest.raises(InvalidTokenError):
            decode_token(token)

    def test_missing_user_id(self):
        with pytest.raises(InvalidTokenError):
            decode_token(make_token(None))

    @pytest.mark.parametrize("user_id", ["abc", True])
    def test_unusable_user_id(self, user_id):
        with pytest.raises(InvalidTokenError):
            decode_token(make_token(user_id))


class TestAuthorize:
    """Tests for authorize."""

    def test_own_resources(self):
        authorize(5, 5, is_service_call=False)

    def test_service_call_may_act_on_anyone(self):
        authorize(None, 5, is_service_call=True)
        authorize(3, 5, is_service_call=True)

    def test_other_users_resources(self):
        with pytest.raises(ForbiddenAccessError):
            authorize(3, 5, is_service_call=False)

    def test_anonymous_caller(self):
        with pytest.raises(ForbiddenAccessError):
            authorize(None, 5, is_service_call=False)
