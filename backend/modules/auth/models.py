"""
Authentication module data models.

Request bodies are validated here at the API boundary. ``UserRecord`` is
the only model that carries the password hash and it never appears in a
response.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, EmailStr

from shared.models import AuthenticatedUser


class TokenClaims(BaseModel):
    """Decoded bearer token claims."""

    sub: str = Field(..., description="Subject (user ID)")
    iat: Optional[int] = Field(None, description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")


class UserRecord(BaseModel):
    """A stored user, including the password hash."""

    id: int
    email: str
    password_hash: str
    name: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_public(self) -> "PublicUser":
        return PublicUser(id=self.id, email=self.email, name=self.name)


class PublicUser(BaseModel):
    """User fields that may be returned to clients."""

    id: int
    email: str
    name: Optional[str] = None

    @classmethod
    def from_identity(cls, user: AuthenticatedUser) -> "PublicUser":
        return cls(id=user.id, email=user.email, name=user.name)


class RegisterRequest(BaseModel):
    email: EmailStr = Field(..., description="Email address, used as login")
    password: str = Field(..., min_length=6, description="Plaintext password")
    name: Optional[str] = Field(None, description="Display name")


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class AuthResult(BaseModel):
    """Outcome of a successful registration or login."""

    token: str
    user: PublicUser


class AuthResponse(BaseModel):
    message: str
    token: str
    user: PublicUser


class CurrentUserResponse(BaseModel):
    message: str
    user: PublicUser
