"""
Authentication module interfaces.

Services depend on these protocols, not on the Supabase implementations,
so tests can run against in-memory stores.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.exceptions import StorefrontError
from shared.models import AuthenticatedUser
from shared.result import Result

from .exceptions import AuthenticationError
from .models import AuthResult, LoginRequest, RegisterRequest, UserRecord


@runtime_checkable
class IUserRepository(Protocol):
    """Persistence contract for user records."""

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        """Return the user with this (lower-cased) email, hash included."""
        ...

    def get_identity(self, user_id: int) -> Optional[AuthenticatedUser]:
        """Return ``{id, email, name}`` for a user without reading the hash."""
        ...

    def create(self, email: str, password_hash: str, name: Optional[str]) -> UserRecord:
        """Insert a user and return it with its generated ID."""
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    Every method returns a ``Result``; expected failures are ``Err``
    values, never raised exceptions.
    """

    async def register(self, request: RegisterRequest) -> Result[AuthResult, StorefrontError]:
        """
        Create an account and issue a token for it.

        Returns:
            Ok(AuthResult), or Err(DuplicateEmailError)
        """
        ...

    async def login(self, request: LoginRequest) -> Result[AuthResult, StorefrontError]:
        """
        Check credentials and issue a token.

        Returns:
            Ok(AuthResult), or Err(InvalidCredentialsError)
        """
        ...

    async def authenticate(
        self, authorization: Optional[str]
    ) -> Result[AuthenticatedUser, AuthenticationError]:
        """
        Resolve an ``Authorization`` header value to the calling user.

        Returns:
            Ok(AuthenticatedUser), or Err with one of MissingTokenError,
            MalformedHeaderError, InvalidTokenError, ExpiredTokenError,
            UserNotFoundError
        """
        ...
