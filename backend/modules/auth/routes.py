"""
Account API endpoints.

Route prefix: /api/auth
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser
from shared.result import unwrap

from .interfaces import IAuthService
from .models import (
    AuthResponse,
    CurrentUserResponse,
    LoginRequest,
    PublicUser,
    RegisterRequest,
)

router = APIRouter()


@router.get("/me", response_model=CurrentUserResponse)
async def get_me(
    user: AuthenticatedUser = Depends(get_current_user),
) -> CurrentUserResponse:
    """Return the caller's identity. Useful for checking a token."""
    return CurrentUserResponse(
        message="User authenticated",
        user=PublicUser.from_identity(user),
    )


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Create an account and return a bearer token for it."""
    result = unwrap(await service.register(request))
    return AuthResponse(message="User created successfully", token=result.token, user=result.user)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Exchange email and password for a bearer token."""
    result = unwrap(await service.login(request))
    return AuthResponse(message="Login successful", token=result.token, user=result.user)
