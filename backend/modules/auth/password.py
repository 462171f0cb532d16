"""
Password hashing and verification.

Uses bcrypt with a random per-password salt and a fixed work factor.
"""

import bcrypt

DEFAULT_ROUNDS = 10

# bcrypt only ever reads the first 72 bytes of a password.
_MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_MAX_PASSWORD_BYTES]


class PasswordHasher:
    """One-way salted password hashing."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Hash a password; two calls with the same input give different digests."""
        return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=self._rounds)).decode()

    def verify(self, password: str, password_hash: str) -> bool:
        """
        Constant-time check of a password against a bcrypt digest.

        A malformed or empty digest is a mismatch, not an error.
        """
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode())
        except (ValueError, TypeError, AttributeError):
            return False
