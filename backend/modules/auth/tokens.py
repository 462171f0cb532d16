"""
Bearer token issuing and verification.

Tokens are HS256 JWTs carrying the user ID as ``sub`` and an expiry
exactly seven days after issuance. Verification is stateless: signature
first, then claims, then expiry against the injected clock.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.result import Ok, Err, Result

from .exceptions import (
    BadSignatureError,
    ExpiredTokenError,
    MalformedTokenError,
)
from .models import TokenClaims

ALGORITHM = "HS256"
TOKEN_TTL = timedelta(days=7)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """
    Signs and verifies bearer tokens with one symmetric key.

    The key and clock are fixed at construction and only read afterwards,
    so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        secret: str,
        clock: Optional[Clock] = None,
        ttl: timedelta = TOKEN_TTL,
    ):
        if not secret:
            raise RuntimeError(
                "Token signing key missing. Set the JWT_SECRET environment variable."
            )
        self._secret = secret
        self._clock = clock or utc_now
        self._ttl = ttl

    def issue(self, subject_id: int) -> str:
        """Create a signed token for ``subject_id``."""
        now = self._clock()
        payload = {
            "sub": str(subject_id),
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> Result[int, MalformedTokenError | BadSignatureError | ExpiredTokenError]:
        """
        Verify a token and return its subject ID.

        Time claims are checked here against the injected clock rather than
        by PyJWT, which always uses the system time.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={
                    "require": ["sub", "exp"],
                    "verify_exp": False,
                    "verify_iat": False,
                    "verify_nbf": False,
                },
            )
        except jwt.InvalidSignatureError:
            return Err(BadSignatureError())
        except jwt.InvalidTokenError:
            return Err(MalformedTokenError())

        try:
            claims = TokenClaims(**payload)
            subject_id = int(claims.sub)
        except (PydanticValidationError, ValueError):
            return Err(MalformedTokenError())

        if claims.exp <= int(self._clock().timestamp()):
            return Err(ExpiredTokenError())

        return Ok(subject_id)
