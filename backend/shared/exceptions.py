"""
Base exception classes for the Storefront backend.

Each module defines its own error kinds that inherit from these bases.
Services return instances wrapped in ``shared.result.Err``; the API layer
maps the base class of the error to an HTTP status.
"""

from typing import Optional, Any


class StorefrontError(Exception):
    """
    Base exception for all Storefront errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(StorefrontError):
    """Resource not found."""

    pass


class ValidationError(StorefrontError):
    """Input validation failed."""

    pass


class AuthenticationError(StorefrontError):
    """Authentication failed (invalid or missing credentials)."""

    pass
