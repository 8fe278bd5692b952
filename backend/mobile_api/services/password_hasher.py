"""
Mobile API Backend — Password Hasher
=====================================

What:  One-way salted password hashing and verification with bcrypt.
How:   bcrypt output is self-describing: "$2b$<cost>$<22-char salt><31-char hash>".
       Every hash carries its own random salt and cost factor, so hashing
       the same password twice yields two different strings and verification
       needs nothing but the stored hash.
Who:   Used by AccountService for registration, login and password reset.

Blocking:
    hash() and verify() are CPU-bound (tens of milliseconds at cost 10).
    AccountService calls them through run_in_threadpool so concurrent
    requests keep being served while a hash is computed.

Limits:
    bcrypt only accepts passwords up to 72 bytes (UTF-8 encoded). Longer
    input is rejected by hash() and never verifies.
"""

import logging

import bcrypt

logger = logging.getLogger(__name__)

MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """
    bcrypt-backed hasher.

    Args:
        rounds: bcrypt cost factor (log2 of the iteration count). Applies to
                new hashes only; existing hashes keep the cost they embed.
    """

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        """
        Hash a plaintext password with a fresh random salt.

        Raises:
            ValueError: plaintext is empty, not a string, or longer than
                        72 bytes once encoded.
        """
        if not isinstance(plaintext, str) or not plaintext:
            raise ValueError("Password must be a non-empty string")
        encoded = plaintext.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")

        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(encoded, salt).decode("ascii")

    def verify(self, plaintext: str, hashed: str) -> bool:
        """
        Check a plaintext password against a stored bcrypt hash.

        Returns False (never raises) when either argument is missing or the
        stored hash is not a valid bcrypt string. bcrypt.checkpw compares
        the digests in constant time.
        """
        if not isinstance(plaintext, str) or not plaintext:
            return False
        if not isinstance(hashed, str) or not hashed:
            return False

        encoded = plaintext.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            return False

        try:
            return bcrypt.checkpw(encoded, hashed.encode("ascii"))
        except ValueError as e:
            # Corrupt stored hash ("Invalid salt" etc.) fails closed
            logger.warning("Stored password hash is not a valid bcrypt hash: %s", type(e).__name__)
            return False
