"""API-level response models shared by all routers."""

from .errors import ErrorResponse, ValidationIssue

__all__ = ["ErrorResponse", "ValidationIssue"]
