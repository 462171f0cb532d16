"""
Shared infrastructure for the Storefront backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- result: Ok/Err values returned by services

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    StorefrontError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
)
from .models import AuthenticatedUser
from .result import Ok, Err, Result, unwrap

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "StorefrontError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthenticatedUser",
    "Ok",
    "Err",
    "Result",
    "unwrap",
]
