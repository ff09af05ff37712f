"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic salting and a
configurable work factor.
"""

import bcrypt

# bcrypt only reads the first 72 bytes of its input.
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class PasswordHasher:
    """One-way salted password hashing."""

    def __init__(self, rounds: int = 10):
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a password with a fresh salt."""
        return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=self._rounds)).decode()

    def verify(self, password: str, password_hash: str) -> bool:
        """
        Constant-time comparison against a bcrypt hash.

        A corrupt or non-bcrypt stored hash counts as a mismatch.
        """
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode())
        except (ValueError, TypeError, AttributeError):
            return False
