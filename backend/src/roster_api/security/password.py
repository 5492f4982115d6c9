"""Password hashing utilities."""

import asyncio
import secrets
from functools import cached_property

import bcrypt

from roster_api.config import get_settings


class PasswordService:
    """Service for password hashing and verification."""

    DEFAULT_BCRYPT_ROUNDS = 10

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> None:
        """Initialize service with the bcrypt work factor.

        Args:
            rounds: bcrypt cost factor (log2 of the iteration count)
        """
        self.rounds = rounds

    def hash_password(self, password: str) -> str:
        """Hash a password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            Hashed password string
        """
        salt = bcrypt.gensalt(rounds=self.rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify_password(self, password: str, hashed: str) -> bool:
        """Verify a password against a hash.

        Args:
            password: Plain text password
            hashed: Hashed password

        Returns:
            True if password matches
        """
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except (ValueError, UnicodeDecodeError, UnicodeEncodeError):
            # Invalid hash format or encoding issues
            return False

    @cached_property
    def dummy_hash(self) -> str:
        """A hash of a random secret, for equalizing login timing on unknown emails."""
        return self.hash_password(secrets.token_urlsafe(16))

    async def hash_password_async(self, password: str) -> str:
        """Hash a password in a worker thread."""
        return await asyncio.to_thread(self.hash_password, password)

    async def verify_password_async(self, password: str, hashed: str) -> bool:
        """Verify a password in a worker thread."""
        return await asyncio.to_thread(self.verify_password, password, hashed)


# Singleton instance
_password_service: PasswordService | None = None


def get_password_service() -> PasswordService:
    """Get the password service singleton.

    Returns:
        PasswordService instance
    """
    global _password_service
    if _password_service is None:
        _password_service = PasswordService(rounds=get_settings().bcrypt_rounds)
    return _password_service
