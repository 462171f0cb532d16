"""
Bearer token authentication for route handlers.

Protected routes declare ``user: AuthenticatedUser = Depends(get_current_user)``.
The dependency either hands the handler the caller's identity or ends the
request with a 401; it never lets an unauthenticated request through.
"""

from typing import Optional

from fastapi import Depends, Header

from modules.auth.interfaces import IAuthService
from shared.models import AuthenticatedUser
from shared.result import unwrap

from ..dependencies import get_auth_service


async def get_current_user(
    authorization: Optional[str] = Header(default=None),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Usage:
        @router.post("")
        async def create(user: AuthenticatedUser = Depends(get_current_user)):
            ...
    """
    return unwrap(await auth.authenticate(authorization))
