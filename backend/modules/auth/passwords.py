"""
Password hashing with bcrypt.

bcrypt is CPU-bound (roughly 100ms at the default cost), so the async
wrappers run it in a worker thread to keep the event loop free.

bcrypt only reads the first 72 bytes of its input, and current releases
refuse anything longer. Longer passwords are rejected up front rather
than silently truncated.
"""

import asyncio

import bcrypt

from .exceptions import PasswordTooLongError

MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """One-way hash and verify for user passwords."""

    def __init__(self, rounds: int = 10):
        self._rounds = rounds

    def check_length(self, plaintext: str) -> None:
        """
        Raises:
            PasswordTooLongError: If the UTF-8 encoding exceeds 72 bytes
        """
        if len(plaintext.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise PasswordTooLongError(MAX_PASSWORD_BYTES)

    def hash(self, plaintext: str) -> str:
        """Hash a password with a fresh random salt."""
        self.check_length(plaintext)
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(plaintext.encode("utf-8"), salt).decode("utf-8")

    def verify(self, plaintext: str, digest: str) -> bool:
        """Check a password against a stored digest. A malformed digest never matches."""
        encoded = plaintext.encode("utf-8")
        # Nothing longer can have been stored.
        if len(encoded) > MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(encoded, digest.encode("utf-8"))
        except ValueError:
            return False

    async def hash_async(self, plaintext: str) -> str:
        return await asyncio.to_thread(self.hash, plaintext)

    async def verify_async(self, plaintext: str, digest: str) -> bool:
        return await asyncio.to_thread(self.verify, plaintext, digest)
