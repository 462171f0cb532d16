"""
Authentication service implementation.

Orchestrates registration, login and per-request authentication on top
of the user repository, the password hasher and the token service.
"""

import asyncio
import logging
from typing import Optional

from shared.exceptions import StorefrontError
from shared.models import AuthenticatedUser
from shared.result import Ok, Err, Result

from .exceptions import (
    AuthenticationError,
    DuplicateEmailError,
    InvalidCredentialsError,
    MalformedHeaderError,
    MissingTokenError,
    UserNotFoundError,
)
from .interfaces import IAuthService, IUserRepository
from .models import AuthResult, LoginRequest, RegisterRequest, UserRecord
from .password import PasswordHasher
from .tokens import TokenService

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    All collaborators are passed in; the service keeps no state of its own
    beyond them. bcrypt and store calls run in worker threads so the event
    loop keeps serving other requests.
    """

    def __init__(
        self,
        users: IUserRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
    ):
        self._users = users
        self._hasher = hasher
        self._tokens = tokens
        # Verified against when the email is unknown so that both login
        # failures cost one bcrypt check.
        self._dummy_hash = hasher.hash("storefront-dummy-password")

    async def register(self, request: RegisterRequest) -> Result[AuthResult, StorefrontError]:
        email = request.email.lower()

        if await asyncio.to_thread(self._users.get_by_email, email) is not None:
            logger.info("Registration rejected: email already in use")
            return Err(DuplicateEmailError())

        password_hash = await asyncio.to_thread(self._hasher.hash, request.password)
        user = await asyncio.to_thread(
            self._users.create,
            email=email,
            password_hash=password_hash,
            name=request.name,
        )
        logger.info("Registered user %s", user.id)
        return Ok(self._issue(user))

    async def login(self, request: LoginRequest) -> Result[AuthResult, StorefrontError]:
        user = await asyncio.to_thread(self._users.get_by_email, request.email.lower())

        if user is None:
            await asyncio.to_thread(self._hasher.verify, request.password, self._dummy_hash)
            logger.info("Login rejected")
            return Err(InvalidCredentialsError())

        if not await asyncio.to_thread(self._hasher.verify, request.password, user.password_hash):
            logger.info("Login rejected")
            return Err(InvalidCredentialsError())

        logger.info("Login: user %s", user.id)
        return Ok(self._issue(user))

    async def authenticate(
        self, authorization: Optional[str]
    ) -> Result[AuthenticatedUser, AuthenticationError]:
        if not authorization:
            return Err(MissingTokenError())

        token = self._extract_bearer_token(authorization)
        if token is None:
            return Err(MalformedHeaderError())

        verified = self._tokens.verify(token)
        if isinstance(verified, Err):
            logger.debug("Token rejected: %s", verified.error.code)
            return verified

        user = await asyncio.to_thread(self._users.get_identity, verified.value)
        if user is None:
            logger.debug("Token subject %s no longer exists", verified.value)
            return Err(UserNotFoundError())

        return Ok(user)

    def _issue(self, user: UserRecord) -> AuthResult:
        return AuthResult(token=self._tokens.issue(user.id), user=user.to_public())

    @staticmethod
    def _extract_bearer_token(authorization: str) -> Optional[str]:
        """Return the token of a ``Bearer <token>`` header, or None."""
        parts = authorization.split(" ")
        if len(parts) != 2:
            return None
        scheme, token = parts
        if scheme.lower() != BEARER_SCHEME or not token:
            return None
        return token
