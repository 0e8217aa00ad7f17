"""Bcrypt password hashes."""

import bcrypt

from shopfront_auth.exceptions import WeakPasswordError

_ENCODING = "utf-8"


class PasswordHashingService:
    """Hash and check passwords with a per-hash random salt.

    Parameters
    ----------
    rounds
        Bcrypt cost factor. Every increment doubles the hashing time, so
        tests use 4 and deployments keep the default of 12.
    """

    MIN_LENGTH = 8
    MAX_LENGTH = 128

    def __init__(self, rounds: int = 12):
        self._rounds = rounds

    def hash(self, password: str) -> str:
        self.validate_strength(password)
        digest = bcrypt.hashpw(
            password.encode(_ENCODING),
            bcrypt.gensalt(rounds=self._rounds),
        )
        return digest.decode(_ENCODING)

    def verify(self, password: str, password_hash: str) -> bool:
        """``False`` for a wrong password and for a hash bcrypt cannot parse."""
        try:
            return bcrypt.checkpw(
                password.encode(_ENCODING),
                password_hash.encode(_ENCODING),
            )
        except (ValueError, TypeError):
            return False

    def validate_strength(self, password: str) -> None:
        """Raise ``WeakPasswordError`` unless the length is within bounds."""
        length = len(password or "")
        if length < self.MIN_LENGTH:
            raise WeakPasswordError(
                f"Password must be at least {self.MIN_LENGTH} characters",
            )
        if length > self.MAX_LENGTH:
            raise WeakPasswordError(
                f"Password cannot exceed {self.MAX_LENGTH} characters",
            )
