"""
Authentication module exceptions.

These are the error kinds returned (inside ``Err``) by the auth services
and turned into HTTP responses by the API error handlers.
"""

from shared.exceptions import AuthenticationError, ValidationError


class MissingTokenError(AuthenticationError):
    """Raised when no Authorization header is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class MalformedHeaderError(AuthenticationError):
    """Raised when the Authorization header is not ``Bearer <token>``."""

    def __init__(self, message: str = "Authorization header must be 'Bearer <token>'"):
        super().__init__(message, code="MALFORMED_HEADER")


class InvalidTokenError(AuthenticationError):
    """Raised when a token is forged or cannot be decoded."""

    def __init__(
        self,
        message: str = "Invalid authentication token",
        code: str = "INVALID_TOKEN",
    ):
        super().__init__(message, code=code)


class MalformedTokenError(InvalidTokenError):
    """Raised when a token is structurally invalid or lacks required claims."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="MALFORMED_TOKEN")


class BadSignatureError(InvalidTokenError):
    """Raised when a token signature does not match the signing key."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="BAD_SIGNATURE")


class ExpiredTokenError(AuthenticationError):
    """Raised when a token is past its expiration instant."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class UserNotFoundError(AuthenticationError):
    """Raised when a token's subject no longer exists in the user store."""

    def __init__(self, message: str = "User not found"):
        super().__init__(message, code="USER_NOT_FOUND")


class InvalidCredentialsError(AuthenticationError):
    """
    Raised when login fails.

    The same message is used whether the email is unknown or the password
    is wrong.
    """

    def __init__(self):
        super().__init__("Invalid email or password", code="INVALID_CREDENTIALS")


class DuplicateEmailError(ValidationError):
    """Raised when registering an email that is already in use."""

    def __init__(self):
        super().__init__("Email is already in use", code="DUPLICATE_EMAIL")
