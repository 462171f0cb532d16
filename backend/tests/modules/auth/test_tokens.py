import base64
import json
from datetime import timedelta

import jwt
import pytest

from modules.auth.exceptions import (
    BadSignatureError,
    ExpiredTokenError,
    InvalidTokenError,
    MalformedTokenError,
)
from modules.auth.tokens import TOKEN_TTL, TokenService
from shared.result import Err, Ok
from tests.conftest import TEST_JWT_SECRET


def _b64url(data: dict) -> str:
    raw = json.dumps(data, separators=(",", ":")).encode()
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()


class TestIssue:
    def test_verify_returns_subject(self, token_service):
        token = token_service.issue(42)
        assert token_service.verify(token) == Ok(42)

    def test_expiry_is_seven_days(self, token_service, clock):
        token = token_service.issue(42)
        claims = jwt.decode(token, TEST_JWT_SECRET, algorithms=["HS256"], options={"verify_exp": False})
        assert claims["sub"] == "42"
        assert claims["iat"] == int(clock().timestamp())
        assert claims["exp"] - claims["iat"] == int(TOKEN_TTL.total_seconds()) == 7 * 24 * 3600

    def test_empty_secret_is_refused(self):
        with pytest.raises(RuntimeError, match="JWT_SECRET"):
            TokenService("")


class TestExpiry:
    def test_valid_just_before_expiry(self, token_service, clock):
        token = token_service.issue(42)
        clock.advance(days=7, seconds=-1)
        assert token_service.verify(token) == Ok(42)

    def test_expired_at_expiry(self, token_service, clock):
        token = token_service.issue(42)
        clock.advance(days=7)
        result = token_service.verify(token)
        assert isinstance(result, Err)
        assert isinstance(result.error, ExpiredTokenError)

    def test_custom_ttl(self, clock):
        service = TokenService(TEST_JWT_SECRET, clock=clock, ttl=timedelta(minutes=5))
        token = service.issue(1)
        clock.advance(minutes=6)
        assert isinstance(service.verify(token).error, ExpiredTokenError)


class TestTampering:
    def test_altered_signature(self, token_service):
        header, payload, signature = token_service.issue(42).split(".")
        altered = "A" if signature[0] != "A" else "B"
        token = f"{header}.{payload}.{altered}{signature[1:]}"

        result = token_service.verify(token)

        assert isinstance(result, Err)
        assert isinstance(result.error, BadSignatureError)

    def test_altered_payload(self, token_service, clock):
        """Swapping the subject without re-signing must not resolve to anyone."""
        header, _, signature = token_service.issue(42).split(".")
        now = int(clock().timestamp())
        forged_payload = _b64url({"sub": "1", "iat": now, "exp": now + 3600})

        result = token_service.verify(f"{header}.{forged_payload}.{signature}")

        assert isinstance(result, Err)
        assert isinstance(result.error, BadSignatureError)

    def test_other_key(self, token_service, clock):
        now = int(clock().timestamp())
        token = jwt.encode({"sub": "42", "exp": now + 60}, "another-secret", algorithm="HS256")
        assert isinstance(token_service.verify(token).error, BadSignatureError)

    def test_unsigned_token(self, token_service, clock):
        now = int(clock().timestamp())
        header = _b64url({"alg": "none", "typ": "JWT"})
        payload = _b64url({"sub": "42", "exp": now + 60})
        result = token_service.verify(f"{header}.{payload}.")
        assert isinstance(result.error, InvalidTokenError)


class TestMalformed:
    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c", "a.b"])
    def test_garbage(self, token_service, token):
        result = token_service.verify(token)
        assert isinstance(result, Err)
        assert isinstance(result.error, MalformedTokenError)

    def test_missing_subject(self, token_service, clock):
        now = int(clock().timestamp())
        token = jwt.encode({"exp": now + 60}, TEST_JWT_SECRET, algorithm="HS256")
        assert isinstance(token_service.verify(token).error, MalformedTokenError)

    def test_missing_expiry(self, token_service):
        token = jwt.encode({"sub": "42"}, TEST_JWT_SECRET, algorithm="HS256")
        assert isinstance(token_service.verify(token).error, MalformedTokenError)

    def test_non_integer_subject(self, token_service, clock):
        now = int(clock().timestamp())
        token = jwt.encode({"sub": "user-abc", "exp": now + 60}, TEST_JWT_SECRET, algorithm="HS256")
        assert isinstance(token_service.verify(token).error, MalformedTokenError)

    def test_error_kinds_share_a_base(self):
        assert issubclass(MalformedTokenError, InvalidTokenError)
        assert issubclass(BadSignatureError, InvalidTokenError)
        assert not issubclass(ExpiredTokenError, InvalidTokenError)
