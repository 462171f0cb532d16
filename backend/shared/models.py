"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models stay in their respective module directories.
"""

from typing import Optional
from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    Produced by the auth gate after the bearer token is verified and the
    subject is found in the user store. Route handlers receive it as an
    explicit argument; it lives only for the duration of one request.
    """

    id: int = Field(..., description="User ID")
    email: str = Field(..., description="User's email address")
    name: Optional[str] = Field(None, description="Display name")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }
