"""
Authentication module.

Handles password hashing, bearer tokens, registration, login and
per-request authentication.

Public API:
- IAuthService / IUserRepository: Interfaces for auth operations and storage
- AuthService: Service implementation
- PasswordHasher, TokenService: Credential primitives
- Auth exceptions: MissingTokenError, InvalidTokenError, etc.
"""

from .interfaces import IAuthService, IUserRepository
from .models import AuthResult, LoginRequest, PublicUser, RegisterRequest, UserRecord
from .password import PasswordHasher
from .tokens import TokenService, TOKEN_TTL
from .service import AuthService
from .exceptions import (
    MissingTokenError,
    MalformedHeaderError,
    InvalidTokenError,
    MalformedTokenError,
    BadSignatureError,
    ExpiredTokenError,
    UserNotFoundError,
    InvalidCredentialsError,
    DuplicateEmailError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "IUserRepository",
    # Implementations
    "AuthService",
    "PasswordHasher",
    "TokenService",
    "TOKEN_TTL",
    # Models
    "AuthResult",
    "LoginRequest",
    "PublicUser",
    "RegisterRequest",
    "UserRecord",
    # Exceptions
    "MissingTokenError",
    "MalformedHeaderError",
    "InvalidTokenError",
    "MalformedTokenError",
    "BadSignatureError",
    "ExpiredTokenError",
    "UserNotFoundError",
    "InvalidCredentialsError",
    "DuplicateEmailError",
]
